"""Current-user routes: profile and password."""
from eduplay.routing import ApiRouter, RequestContext
from eduplay.schemas import PasswordChangeSchema, ProfileUpdateSchema

router = ApiRouter(prefix="/api/user")


@router.get("/profile")
async def get_profile(ctx: RequestContext):
    return await ctx.current_user()


@router.put("/profile")
async def update_profile(ctx: RequestContext):
    """Partial profile update. Returns a fresh token since its claims changed."""
    user = await ctx.current_user()
    body = await ctx.parse(ProfileUpdateSchema)
    updated = await ctx.services.users.update_profile(
        user["id"], username=body.username, email=body.email, avatar=body.avatar
    )
    return {"success": True, "user": updated, "token": ctx.services.auth.generate_token(updated)}


@router.put("/password")
async def change_password(ctx: RequestContext):
    user = await ctx.current_user()
    body = await ctx.parse(PasswordChangeSchema)
    await ctx.services.auth.change_password(user["id"], body.old_password, body.new_password)
    return {"success": True}
