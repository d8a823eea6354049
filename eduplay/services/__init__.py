from eduplay.services.auth import AuthService
from eduplay.services.container import Services, build_services
from eduplay.services.games import DEMO_GAME, GameService
from eduplay.services.progress import ProgressService
from eduplay.services.seeding import seed_demo_data
from eduplay.services.users import UserService

__all__ = [
    "AuthService",
    "DEMO_GAME",
    "GameService",
    "ProgressService",
    "Services",
    "UserService",
    "build_services",
    "seed_demo_data",
]
