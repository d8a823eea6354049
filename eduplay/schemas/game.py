"""Pydantic schemas for the game catalogue (admin side)."""
from typing import Literal

from pydantic import BaseModel, Field

GameStatus = Literal["active", "in-development", "planned"]


class GameCreateSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    path: str = Field(min_length=1, max_length=255)
    description: str = ""
    icon: str = "🎮"
    category: str = ""
    difficulty: str = "beginner"
    color: str = "#3498db"
    status: GameStatus = "planned"


class GameUpdateSchema(BaseModel):
    """Partial update: omitted fields keep their stored value."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    path: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    icon: str | None = None
    category: str | None = None
    difficulty: str | None = None
    color: str | None = None
    status: GameStatus | None = None
