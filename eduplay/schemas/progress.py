"""Pydantic schemas for progress saves and stats."""
from datetime import datetime

from pydantic import BaseModel, Field

from eduplay.db.base import SQLITE_MAX_INTEGER


class ProgressSaveSchema(BaseModel):
    score: int = Field(ge=0, le=SQLITE_MAX_INTEGER)
    completed: bool = False


class UserStatsOutSchema(BaseModel):
    games_played: int = 0
    total_attempts: int = 0
    games_completed: int = 0
    avg_score: float = 0.0
    best_score: int = 0
    last_played: datetime | None = None


class PlatformStatsOutSchema(BaseModel):
    users: int
    games: int
    plays: int
    completed: int
