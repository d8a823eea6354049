"""Pydantic schemas for profile edits and admin user management."""
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from eduplay.schemas.auth import check_email, strip_required


class ProfileUpdateSchema(BaseModel):
    """Partial update: omitted fields keep their stored value."""

    username: str | None = Field(default=None, min_length=1, max_length=64)
    email: str | None = Field(default=None, max_length=255)
    avatar: str | None = Field(default=None, min_length=1, max_length=64)

    @field_validator("username", "email")
    @classmethod
    def strip(cls, value: str | None) -> str | None:
        return strip_required(value) if value is not None else None

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str | None) -> str | None:
        return check_email(value) if value is not None else None


class UserAdminUpdateSchema(BaseModel):
    username: str | None = Field(default=None, min_length=1, max_length=64)
    email: str | None = Field(default=None, max_length=255)
    role: Literal["user", "admin"] | None = None

    @field_validator("username", "email")
    @classmethod
    def strip(cls, value: str | None) -> str | None:
        return strip_required(value) if value is not None else None

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str | None) -> str | None:
        return check_email(value) if value is not None else None
