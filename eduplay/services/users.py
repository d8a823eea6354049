"""User management: profile edits and admin actions."""
import logging

from sqlalchemy import delete, select, update

from eduplay.core.errors import (
    ConstraintViolation,
    DuplicateUserError,
    NotFoundError,
    SelfModificationError,
)
from eduplay.db.gateway import Database
from eduplay.models import PUBLIC_USER_COLUMNS, Progress, User

logger = logging.getLogger("eduplay.services.users")


class UserService:
    def __init__(self, db: Database):
        self.db = db

    async def list_users(self) -> list[dict]:
        return await self.db.fetch_all(select(*PUBLIC_USER_COLUMNS).order_by(User.id))

    async def get_user(self, user_id: int) -> dict:
        user = await self.db.fetch_one(select(*PUBLIC_USER_COLUMNS).where(User.id == user_id))
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def _apply(self, user_id: int, changes: dict) -> dict:
        """Update the given columns and return the fresh public row."""
        try:
            async with self.db.transaction() as conn:
                if await conn.fetch_one(select(User.id).where(User.id == user_id)) is None:
                    raise NotFoundError("User not found")
                if changes:
                    await conn.execute(update(User).where(User.id == user_id).values(**changes))
                return await conn.fetch_one(select(*PUBLIC_USER_COLUMNS).where(User.id == user_id))
        except ConstraintViolation as exc:
            raise DuplicateUserError() from exc

    async def update_profile(self, user_id: int, username=None, email=None, avatar=None) -> dict:
        changes = {"username": username, "email": email, "avatar": avatar}
        return await self._apply(user_id, {k: v for k, v in changes.items() if v is not None})

    async def admin_update(self, admin: dict, user_id: int, username=None, email=None, role=None) -> dict:
        if user_id == admin["id"] and role is not None and role != "admin":
            raise SelfModificationError("You cannot change your own role")
        changes = {"username": username, "email": email, "role": role}
        user = await self._apply(user_id, {k: v for k, v in changes.items() if v is not None})
        logger.info("Admin %s updated user id=%s", admin["username"], user_id)
        return user

    async def delete_user(self, admin: dict, user_id: int) -> None:
        """Delete a user and their progress. An admin cannot delete their own account."""
        if user_id == admin["id"]:
            raise SelfModificationError("You cannot delete your own account")
        async with self.db.transaction() as conn:
            if await conn.fetch_one(select(User.id).where(User.id == user_id)) is None:
                raise NotFoundError("User not found")
            await conn.execute(delete(Progress).where(Progress.user_id == user_id))
            await conn.execute(delete(User).where(User.id == user_id))
        logger.info("Admin %s deleted user id=%s", admin["username"], user_id)
