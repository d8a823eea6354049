"""Edu Games Platform - FastAPI app entry point.

Everything under /api goes through the platform's own route table; every
other path is served from the front end's public directory.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from eduplay.core.config import Settings, get_settings
from eduplay.core.errors import NotFoundError
from eduplay.responses import error_response
from eduplay.routers import build_route_table
from eduplay.routing import Dispatcher
from eduplay.services import build_services, seed_demo_data
from eduplay.static import StaticAssetResponder

logger = logging.getLogger("eduplay")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

HTTP_METHODS = ["GET", "POST", "PUT", "DELETE"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    services = build_services(settings)

    await services.db.create_schema()
    logger.info("Database ready: %s", settings.database_url)

    if settings.seed_demo_data:
        await seed_demo_data(services.db, settings.demo_password)

    app.state.services = services
    logger.info("%s %s ready", settings.app_name, settings.app_version)

    yield

    await services.db.dispose()
    logger.info("Shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    dispatcher = Dispatcher(build_route_table())
    assets = StaticAssetResponder(settings.public_dir)

    @app.middleware("http")
    async def cors(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        if request.method == "OPTIONS":
            return Response(status_code=204, headers=CORS_HEADERS)
        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response

    @app.api_route("/api/{path:path}", methods=HTTP_METHODS, include_in_schema=False)
    async def api(request: Request):
        return await dispatcher.dispatch(request)

    @app.api_route("/{path:path}", methods=HTTP_METHODS, include_in_schema=False)
    async def static(request: Request):
        if request.method != "GET":
            return error_response(NotFoundError("Page was not found"))
        return assets.respond(request.url.path)

    return app


app = create_app()
