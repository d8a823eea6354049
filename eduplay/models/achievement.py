"""Achievement model. The table is created with the schema; nothing writes to it yet."""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.sql import func

from eduplay.db.base import Base


class Achievement(Base):
    __tablename__ = "achievements"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=True)
    achievement_type = Column(String(64), nullable=False)
    achieved_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
