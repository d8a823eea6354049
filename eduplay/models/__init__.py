from eduplay.models.user import User, ROLES, PUBLIC_USER_COLUMNS
from eduplay.models.game import Game, GAME_STATUSES
from eduplay.models.progress import Progress
from eduplay.models.achievement import Achievement

__all__ = ["User", "Game", "Progress", "Achievement", "ROLES", "GAME_STATUSES", "PUBLIC_USER_COLUMNS"]
