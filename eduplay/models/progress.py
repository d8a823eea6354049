"""Progress model: one row per (user, game), cumulative over all plays."""
from sqlalchemy import Column, Integer, Boolean, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func, expression

from eduplay.db.base import Base


class Progress(Base):
    __tablename__ = "user_progress"
    __table_args__ = (UniqueConstraint("user_id", "game_id", name="uq_user_progress_user_game"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = Column(Integer, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)

    score = Column(Integer, nullable=False, server_default="0")  # latest
    max_score = Column(Integer, nullable=False, server_default="0")  # high-water mark
    attempts = Column(Integer, nullable=False, server_default="0")
    completed = Column(Boolean, nullable=False, server_default=expression.false())  # sticky
    last_played = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
