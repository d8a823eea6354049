from eduplay.schemas.auth import LoginSchema, PasswordChangeSchema, RegisterSchema
from eduplay.schemas.game import GameCreateSchema, GameUpdateSchema
from eduplay.schemas.progress import PlatformStatsOutSchema, ProgressSaveSchema, UserStatsOutSchema
from eduplay.schemas.user import ProfileUpdateSchema, UserAdminUpdateSchema

__all__ = [
    "GameCreateSchema",
    "GameUpdateSchema",
    "LoginSchema",
    "PasswordChangeSchema",
    "PlatformStatsOutSchema",
    "ProfileUpdateSchema",
    "ProgressSaveSchema",
    "RegisterSchema",
    "UserAdminUpdateSchema",
    "UserStatsOutSchema",
]
