"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings

# Base path for the front end (parent of eduplay/)
BASE_DIR = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Edu Games Platform"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 3000
    public_dir: Path = BASE_DIR / "public"

    # Database
    database_url: str = "sqlite+aiosqlite:///./database.sqlite"
    seed_demo_data: bool = True
    demo_password: str = "password123"

    # JWT
    secret_key: str = "change-me-in-production-use-env"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
