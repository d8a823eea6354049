"""Game model: one catalogue entry the front end can launch."""
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from eduplay.db.base import Base

GAME_STATUSES = ("active", "in-development", "planned")


class Game(Base):
    __tablename__ = "games"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    icon = Column(String(16), nullable=True)  # single glyph or emoji
    category = Column(String(64), nullable=True)
    difficulty = Column(String(64), nullable=True)
    # launch path is unique so demo seeding can't insert the same game twice
    path = Column(String(255), unique=True, nullable=False)
    color = Column(String(16), nullable=True)
    status = Column(String(32), nullable=False, server_default="active")
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
