"""Password hashing and bearer token signing."""
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from eduplay.core.config import Settings

# Work factor is fixed; existing hashes carry their own rounds.
BCRYPT_ROUNDS = 10

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=BCRYPT_ROUNDS)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify() -> None:
    """Spend one verification worth of time when there is no hash to check."""
    pwd_context.dummy_verify()


def create_access_token(
    claims: dict[str, Any],
    settings: Settings,
    issued_at: datetime | None = None,
) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = dict(claims)
    to_encode.update({"iat": issued_at, "exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str | None, settings: Settings) -> dict | None:
    """Verify signature and expiry; None for anything that does not check out."""
    if not token or not isinstance(token, str):
        return None
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
