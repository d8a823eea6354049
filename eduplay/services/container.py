"""Service container built once at startup and handed to every request."""
from dataclasses import dataclass

from eduplay.core.config import Settings
from eduplay.db.gateway import Database
from eduplay.services.auth import AuthService
from eduplay.services.games import GameService
from eduplay.services.progress import ProgressService
from eduplay.services.users import UserService


@dataclass
class Services:
    settings: Settings
    db: Database
    auth: AuthService
    games: GameService
    progress: ProgressService
    users: UserService


def build_services(settings: Settings, db: Database | None = None) -> Services:
    db = db or Database(settings.database_url, echo=settings.debug)
    return Services(
        settings=settings,
        db=db,
        auth=AuthService(db, settings),
        games=GameService(db),
        progress=ProgressService(db),
        users=UserService(db),
    )
