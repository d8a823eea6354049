"""Route patterns, ambiguity checks at registration and dispatch order."""
import pytest

from eduplay.core.errors import RouteConflictError
from eduplay.routers import build_route_table
from eduplay.routing import ApiRouter, RoutePattern, RouteTable


async def handler_a(ctx):
    return "a"


async def handler_b(ctx):
    return "b"


def test_pattern_binds_parameter():
    assert RoutePattern("/api/game/:id").match("/api/game/42") == {"id": "42"}


def test_pattern_requires_same_segment_count():
    pattern = RoutePattern("/api/game/:id")
    assert pattern.match("/api/game/42/extra") is None
    assert pattern.match("/api/game") is None


def test_pattern_literal_segments_must_match():
    assert RoutePattern("/api/game/:id/progress").match("/api/game/7/score") is None


def test_pattern_rejects_wildcards_and_bad_names():
    with pytest.raises(ValueError):
        RoutePattern("/api/*")
    with pytest.raises(ValueError):
        RoutePattern("/api/:")
    with pytest.raises(ValueError):
        RoutePattern("/api/:id/:id")
    with pytest.raises(ValueError):
        RoutePattern("api/games")


def test_literal_route_wins_over_parameterized():
    table = RouteTable()
    table.add("GET", "/api/game/:id", handler_a)
    table.add("GET", "/api/game/featured", handler_b)

    match = table.resolve("GET", "/api/game/featured")
    assert match.handler is handler_b
    assert match.params == {}

    match = table.resolve("GET", "/api/game/3")
    assert match.handler is handler_a
    assert match.params == {"id": "3"}


def test_routes_are_keyed_by_verb():
    table = RouteTable()
    table.add("GET", "/api/admin/games", handler_a)
    table.add("POST", "/api/admin/games", handler_b)

    assert table.resolve("GET", "/api/admin/games").handler is handler_a
    assert table.resolve("POST", "/api/admin/games").handler is handler_b
    assert table.resolve("DELETE", "/api/admin/games") is None


def test_duplicate_literal_route_is_refused():
    table = RouteTable()
    table.add("GET", "/api/games", handler_a)
    with pytest.raises(RouteConflictError):
        table.add("GET", "/api/games/", handler_b)


def test_ambiguous_parameterized_routes_are_refused():
    table = RouteTable()
    table.add("GET", "/api/:kind/1", handler_a)
    with pytest.raises(RouteConflictError):
        table.add("GET", "/api/game/:id", handler_b)


def test_distinct_parameterized_routes_coexist():
    table = RouteTable()
    table.add("PUT", "/api/admin/game/:id", handler_a)
    table.add("PUT", "/api/admin/user/:id", handler_b)
    table.add("GET", "/api/admin/game/:id", handler_b)

    assert table.resolve("PUT", "/api/admin/user/5").handler is handler_b
    assert table.resolve("PUT", "/api/admin/game/5").handler is handler_a


def test_trailing_slash_resolves_to_same_route():
    table = RouteTable()
    table.add("GET", "/api/games", handler_a)
    assert table.resolve("GET", "/api/games/").handler is handler_a


def test_router_prefix_and_status_code():
    router = ApiRouter(prefix="/api/things/")

    @router.post("/new", status_code=201)
    async def create(ctx):
        return {}

    table = RouteTable()
    table.include(router)
    match = table.resolve("post", "/api/things/new")
    assert match.handler is create
    assert match.route.status_code == 201


def test_application_route_table():
    table = build_route_table()

    match = table.resolve("GET", "/api/game/42")
    assert match.params == {"id": "42"}

    assert table.resolve("GET", "/api/game/42/extra") is None
    assert table.resolve("POST", "/api/game/42/progress").params == {"id": "42"}
    assert table.resolve("GET", "/api/admin/games") is not None
    assert table.resolve("POST", "/api/admin/games").route.status_code == 201
    assert len(table.routes()) == 22
