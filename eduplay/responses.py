"""JSON responses: every body is pretty-printed, errors are ``{"error": message}``."""
import json
from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from eduplay.core.errors import AppError


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(
            jsonable_encoder(content),
            ensure_ascii=False,
            indent=2,
        ).encode("utf-8")


def error_response(exc: AppError) -> PrettyJSONResponse:
    return PrettyJSONResponse(exc.to_dict(), status_code=exc.status_code)
