"""Progress routes: save a play, read history and stats for the current user."""
from eduplay.routing import ApiRouter, RequestContext
from eduplay.schemas import ProgressSaveSchema

router = ApiRouter(prefix="/api")


@router.post("/game/:id/progress")
async def save_progress(ctx: RequestContext):
    user = await ctx.current_user()
    game_id = ctx.int_param("id")
    body = await ctx.parse(ProgressSaveSchema)
    row = await ctx.services.progress.save_progress(user["id"], game_id, body.score, body.completed)
    return {"success": True, "progress": row}


@router.get("/user/progress")
async def list_progress(ctx: RequestContext):
    user = await ctx.current_user()
    return await ctx.services.progress.list_for_user(user["id"])


@router.get("/user/stats")
async def user_stats(ctx: RequestContext):
    user = await ctx.current_user()
    return await ctx.services.progress.user_stats(user["id"])
