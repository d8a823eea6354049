"""User model: account, credentials and role."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from eduplay.db.base import Base

ROLES = ("user", "admin")


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    avatar = Column(String(64), nullable=False, server_default="default")
    role = Column(String(16), nullable=False, server_default="user")  # user | admin
    created_at = Column(DateTime, server_default=func.current_timestamp(), nullable=True)
    last_login = Column(DateTime, nullable=True)


# Everything but the hash; this is what leaves the server.
PUBLIC_USER_COLUMNS = (
    User.id,
    User.username,
    User.email,
    User.role,
    User.avatar,
    User.created_at,
    User.last_login,
)
