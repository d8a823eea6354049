"""Pydantic schemas for registration, login and credential changes."""
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_PASSWORD_LENGTH = 6
# bcrypt hard limit: 72 bytes (UTF-8)
MAX_PASSWORD_BYTES = 72

# Simple, practical email check
EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def check_password(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
    return value


def strip_required(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("field is required")
    return value


def check_email(value: str) -> str:
    if not EMAIL_RE.match(value):
        raise ValueError("email is not valid")
    return value


class RegisterSchema(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    email: str = Field(min_length=1, max_length=255)
    password: str

    @field_validator("username", "email")
    @classmethod
    def strip(cls, value: str) -> str:
        return strip_required(value)

    @field_validator("email")
    @classmethod
    def email_shape(cls, value: str) -> str:
        return check_email(value)

    @field_validator("password")
    @classmethod
    def password_policy(cls, value: str) -> str:
        return check_password(value)


class LoginSchema(BaseModel):
    identifier: str = Field(min_length=1)  # username or email
    password: str = Field(min_length=1)


class PasswordChangeSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(alias="oldPassword", min_length=1)
    new_password: str = Field(alias="newPassword")

    @field_validator("new_password")
    @classmethod
    def password_policy(cls, value: str) -> str:
        return check_password(value)
