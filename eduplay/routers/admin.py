"""Admin routes: game catalogue and user management, platform stats.

Every handler resolves the admin before reading the body, so a missing token
(401) or a non-admin role (403) never reaches a mutation.
"""
from eduplay.routing import ApiRouter, RequestContext
from eduplay.schemas import GameCreateSchema, GameUpdateSchema, UserAdminUpdateSchema

router = ApiRouter(prefix="/api/admin")


# ---------- games ----------

@router.get("/games")
async def list_games(ctx: RequestContext):
    await ctx.current_admin()
    return await ctx.services.games.list_games()


@router.get("/game/:id")
async def get_game(ctx: RequestContext):
    await ctx.current_admin()
    return await ctx.services.games.get_game(ctx.int_param("id"))


@router.post("/games", status_code=201)
async def create_game(ctx: RequestContext):
    await ctx.current_admin()
    body = await ctx.parse(GameCreateSchema)
    game_id = await ctx.services.games.create_game(body.model_dump())
    return {"id": game_id}


@router.put("/game/:id")
async def update_game(ctx: RequestContext):
    await ctx.current_admin()
    game_id = ctx.int_param("id")
    body = await ctx.parse(GameUpdateSchema)
    await ctx.services.games.update_game(game_id, body.model_dump())
    return {"success": True}


@router.delete("/game/:id")
async def delete_game(ctx: RequestContext):
    await ctx.current_admin()
    await ctx.services.games.delete_game(ctx.int_param("id"))
    return {"success": True}


# ---------- users ----------

@router.get("/users")
async def list_users(ctx: RequestContext):
    await ctx.current_admin()
    return await ctx.services.users.list_users()


@router.get("/user/:id")
async def get_user(ctx: RequestContext):
    await ctx.current_admin()
    return await ctx.services.users.get_user(ctx.int_param("id"))


@router.put("/user/:id")
async def update_user(ctx: RequestContext):
    admin = await ctx.current_admin()
    user_id = ctx.int_param("id")
    body = await ctx.parse(UserAdminUpdateSchema)
    await ctx.services.users.admin_update(
        admin, user_id, username=body.username, email=body.email, role=body.role
    )
    return {"success": True}


@router.delete("/user/:id")
async def delete_user(ctx: RequestContext):
    admin = await ctx.current_admin()
    await ctx.services.users.delete_user(admin, ctx.int_param("id"))
    return {"success": True}


# ---------- stats ----------

@router.get("/stats")
async def platform_stats(ctx: RequestContext):
    await ctx.current_admin()
    return await ctx.services.progress.platform_stats()
