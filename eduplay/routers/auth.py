"""Auth routes: register, login, logout. Stateless bearer tokens."""
from eduplay.routing import ApiRouter, RequestContext
from eduplay.schemas import LoginSchema, RegisterSchema

router = ApiRouter(prefix="/api/auth")


@router.post("/register", status_code=201)
async def register(ctx: RequestContext):
    """Create the account and log it in straight away."""
    body = await ctx.parse(RegisterSchema)
    result = await ctx.services.auth.register(body.username, body.email, body.password)
    return {"success": True, **result}


@router.post("/login")
async def login(ctx: RequestContext):
    body = await ctx.parse(LoginSchema)
    result = await ctx.services.auth.login(body.identifier, body.password)
    return {"success": True, **result}


@router.post("/logout")
async def logout(ctx: RequestContext):
    # nothing to revoke: the client drops its token
    return {"success": True}
