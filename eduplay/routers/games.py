"""Public routes: health check and the game catalogue."""
import platform
from datetime import datetime, timezone

from eduplay.routing import ApiRouter, RequestContext

router = ApiRouter(prefix="/api")


@router.get("/health")
async def health(ctx: RequestContext):
    settings = ctx.services.settings
    return {
        "status": "healthy",
        "message": "server works",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "app": settings.app_name,
        "version": settings.app_version,
        "python_version": platform.python_version(),
    }


@router.get("/games")
async def list_games(ctx: RequestContext):
    return await ctx.services.games.list_catalogue()


@router.get("/game/:id")
async def get_game(ctx: RequestContext):
    return await ctx.services.games.get_game(ctx.int_param("id"))
