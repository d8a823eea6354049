from eduplay.routers import admin, auth, games, progress, user
from eduplay.routing import RouteTable

__all__ = ["admin", "auth", "games", "progress", "user", "build_route_table"]


def build_route_table() -> RouteTable:
    table = RouteTable()
    for module in (games, auth, user, progress, admin):
        table.include(module.router)
    return table
