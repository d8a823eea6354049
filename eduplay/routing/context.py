"""Per-request context handed to every API handler."""
import json
import logging
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from eduplay.core.errors import Forbidden, NotFoundError, Unauthorized, ValidationError
from eduplay.db.base import SQLITE_MAX_INTEGER
from eduplay.services.container import Services

logger = logging.getLogger("eduplay.routing")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def _describe(exc: PydanticValidationError) -> str:
    """First validation problem as ``field: message``."""
    error = exc.errors()[0]
    message = error["msg"].removeprefix("Value error, ")
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {message}" if field else message


class RequestContext:
    def __init__(self, request: Request, params: dict[str, str], services: Services):
        self.request = request
        self.params = params
        self.services = services
        self._user: dict | None = None

    async def json(self) -> dict:
        """Decoded JSON object body; an empty body reads as ``{}``."""
        body = await self.request.body()
        if not body.strip():
            return {}
        try:
            data = json.loads(body)
        except ValueError as exc:
            raise ValidationError("Invalid JSON format") from exc
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        return data

    async def parse(self, schema: type[SchemaT]) -> SchemaT:
        data = await self.json()
        try:
            return schema.model_validate(data)
        except PydanticValidationError as exc:
            raise ValidationError(_describe(exc)) from exc

    def int_param(self, name: str) -> int:
        # ids that can't be integers can't exist
        value = self.params.get(name, "")
        if not (value.isascii() and value.isdigit()) or int(value) > SQLITE_MAX_INTEGER:
            raise NotFoundError()
        return int(value)

    def bearer_token(self) -> str | None:
        header = self.request.headers.get("authorization", "")
        if not header.startswith("Bearer "):
            return None
        return header[len("Bearer "):].strip() or None

    async def current_user(self) -> dict:
        if self._user is None:
            token = self.bearer_token()
            if token is None:
                raise Unauthorized()
            user = await self.services.auth.get_user_from_token(token)
            if user is None:
                raise Unauthorized()
            self._user = user
        return self._user

    async def current_admin(self) -> dict:
        """Authenticated user whose stored role is admin; the token's role claim is not trusted."""
        user = await self.current_user()
        if user["role"] != "admin":
            logger.info("User %s with role %r denied admin access", user["username"], user["role"])
            raise Forbidden()
        return user
