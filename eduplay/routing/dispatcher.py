"""Dispatcher: resolve, run the handler, turn the outcome into a JSON response."""
import logging

from fastapi import Request, Response

from eduplay.core.errors import AppError, NotFoundError
from eduplay.responses import PrettyJSONResponse, error_response
from eduplay.routing.context import RequestContext
from eduplay.routing.table import RouteTable

logger = logging.getLogger("eduplay.routing")


class Dispatcher:
    def __init__(self, table: RouteTable):
        self.table = table

    async def dispatch(self, request: Request) -> Response:
        match = self.table.resolve(request.method, request.url.path)
        if match is None:
            return error_response(NotFoundError("Page was not found"))

        ctx = RequestContext(request, match.params, request.app.state.services)
        try:
            payload = await match.handler(ctx)
        except AppError as exc:
            if exc.status_code >= 500:
                logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
            return error_response(exc)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.url.path)
            return error_response(AppError())

        if isinstance(payload, Response):
            return payload
        return PrettyJSONResponse(payload, status_code=match.route.status_code)
