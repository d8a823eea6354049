"""Credential service: registration, login, tokens and password changes."""
import logging
from datetime import datetime

from sqlalchemy import insert, or_, select, update
from sqlalchemy.sql import func
from starlette.concurrency import run_in_threadpool

from eduplay.core.config import Settings
from eduplay.core.errors import (
    ConstraintViolation,
    DuplicateUserError,
    InvalidCredentialsError,
    NotFoundError,
    StorageError,
)
from eduplay.core.security import (
    create_access_token,
    decode_access_token,
    dummy_verify,
    hash_password,
    verify_password,
)
from eduplay.db.gateway import Database
from eduplay.models import PUBLIC_USER_COLUMNS, User

logger = logging.getLogger("eduplay.services.auth")


class AuthService:
    def __init__(self, db: Database, settings: Settings):
        self.db = db
        self.settings = settings

    # ---------- tokens ----------

    def generate_token(self, user: dict, issued_at: datetime | None = None) -> str:
        claims = {
            "id": user["id"],
            "username": user["username"],
            "email": user["email"],
            "role": user["role"],
        }
        return create_access_token(claims, self.settings, issued_at=issued_at)

    def verify_token(self, token: str | None) -> dict | None:
        """Claims of a valid, unexpired token; None on any failure."""
        return decode_access_token(token, self.settings)

    async def get_user_from_token(self, token: str | None) -> dict | None:
        """Re-read the user behind a token. The claims may be stale, the row is not."""
        claims = self.verify_token(token)
        if not claims or not isinstance(claims.get("id"), int):
            return None
        return await self.get_user(claims["id"])

    # ---------- users ----------

    async def get_user(self, user_id: int) -> dict | None:
        return await self.db.fetch_one(select(*PUBLIC_USER_COLUMNS).where(User.id == user_id))

    async def register(self, username: str, email: str, password: str) -> dict:
        password_hash = await run_in_threadpool(hash_password, password)

        try:
            async with self.db.transaction() as conn:
                existing = await conn.fetch_one(
                    select(User.id).where(or_(User.username == username, User.email == email))
                )
                if existing:
                    raise DuplicateUserError()
                result = await conn.execute(
                    insert(User).values(username=username, email=email, password_hash=password_hash)
                )
                user = await conn.fetch_one(
                    select(*PUBLIC_USER_COLUMNS).where(User.id == result.inserted_id)
                )
        except ConstraintViolation as exc:
            raise DuplicateUserError() from exc

        logger.info("Registered user %s (id=%s)", user["username"], user["id"])
        return {"user": user, "token": self.generate_token(user)}

    async def login(self, identifier: str, password: str) -> dict:
        row = await self.db.fetch_one(
            select(User.id, User.password_hash).where(
                or_(User.username == identifier, User.email == identifier)
            )
        )
        if row is None:
            # same cost and same error as a wrong password
            await run_in_threadpool(dummy_verify)
            raise InvalidCredentialsError()

        if not await run_in_threadpool(verify_password, password, row["password_hash"]):
            raise InvalidCredentialsError()

        try:
            await self.db.execute(
                update(User).where(User.id == row["id"]).values(last_login=func.current_timestamp())
            )
        except StorageError:
            logger.warning("Could not update last_login for user id=%s", row["id"])

        user = await self.get_user(row["id"])
        if user is None:
            raise InvalidCredentialsError()
        return {"user": user, "token": self.generate_token(user)}

    async def change_password(self, user_id: int, old_password: str, new_password: str) -> bool:
        row = await self.db.fetch_one(select(User.password_hash).where(User.id == user_id))
        if row is None:
            raise NotFoundError("User not found")

        if not await run_in_threadpool(verify_password, old_password, row["password_hash"]):
            raise InvalidCredentialsError("Invalid current password")

        new_hash = await run_in_threadpool(hash_password, new_password)
        await self.db.execute(
            update(User).where(User.id == user_id).values(password_hash=new_hash)
        )
        logger.info("Password changed for user id=%s", user_id)
        return True
