"""Route table: (verb, path pattern) -> handler.

Patterns are built from literal segments and ``:name`` placeholders that bind
exactly one segment. Literal routes live in a dict per verb; parameterized
routes are scanned in registration order and the first structural match wins.
Registration refuses two parameterized routes of the same verb that could
match the same path, so scan order never decides between them.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from eduplay.core.errors import RouteConflictError

METHODS = ("GET", "POST", "PUT", "DELETE")

Handler = Callable[..., Awaitable[Any]]


def split_path(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


def normalize_path(path: str) -> str:
    return "/" + "/".join(split_path(path))


class RoutePattern:
    def __init__(self, pattern: str):
        if not pattern.startswith("/"):
            raise ValueError(f"Route pattern must start with '/': {pattern!r}")
        self.pattern = pattern
        self.segments = tuple(split_path(pattern))
        self.path = normalize_path(pattern)

        names = []
        for segment in self.segments:
            if "*" in segment:
                raise ValueError(f"Wildcards are not supported: {pattern!r}")
            if segment.startswith(":"):
                name = segment[1:]
                if not name:
                    raise ValueError(f"Empty parameter name in {pattern!r}")
                if name in names:
                    raise ValueError(f"Duplicate parameter {name!r} in {pattern!r}")
                names.append(name)
        self.param_names = tuple(names)

    @property
    def is_literal(self) -> bool:
        return not self.param_names

    def match(self, path: str) -> dict[str, str] | None:
        parts = split_path(path)
        if len(parts) != len(self.segments):
            return None
        params = {}
        for segment, part in zip(self.segments, parts):
            if segment.startswith(":"):
                params[segment[1:]] = part
            elif segment != part:
                return None
        return params

    def overlaps(self, other: "RoutePattern") -> bool:
        """True if some path matches both patterns."""
        if len(self.segments) != len(other.segments):
            return False
        for mine, theirs in zip(self.segments, other.segments):
            if not mine.startswith(":") and not theirs.startswith(":") and mine != theirs:
                return False
        return True

    def __repr__(self) -> str:
        return f"RoutePattern({self.pattern!r})"


@dataclass(frozen=True)
class Route:
    method: str
    pattern: RoutePattern
    handler: Handler
    status_code: int = 200


@dataclass(frozen=True)
class RouteMatch:
    route: Route
    params: dict[str, str]

    @property
    def handler(self) -> Handler:
        return self.route.handler


class ApiRouter:
    """Collects handlers for one feature area; included into a RouteTable."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix.rstrip("/")
        self.routes: list[tuple[str, str, Handler, int]] = []

    def route(self, method: str, path: str, status_code: int = 200):
        def decorator(handler: Handler) -> Handler:
            self.routes.append((method, self.prefix + path, handler, status_code))
            return handler

        return decorator

    def get(self, path: str, status_code: int = 200):
        return self.route("GET", path, status_code)

    def post(self, path: str, status_code: int = 200):
        return self.route("POST", path, status_code)

    def put(self, path: str, status_code: int = 200):
        return self.route("PUT", path, status_code)

    def delete(self, path: str, status_code: int = 200):
        return self.route("DELETE", path, status_code)


class RouteTable:
    def __init__(self):
        self._literal: dict[str, dict[str, Route]] = {}
        self._parameterized: dict[str, list[Route]] = {}

    def add(self, method: str, path: str, handler: Handler, status_code: int = 200) -> Route:
        method = method.upper()
        if method not in METHODS:
            raise ValueError(f"Unsupported method {method!r}")
        route = Route(method, RoutePattern(path), handler, status_code)

        if route.pattern.is_literal:
            routes = self._literal.setdefault(method, {})
            if route.pattern.path in routes:
                raise RouteConflictError(f"{method} {path} is already registered")
            routes[route.pattern.path] = route
        else:
            routes = self._parameterized.setdefault(method, [])
            for existing in routes:
                if existing.pattern.overlaps(route.pattern):
                    raise RouteConflictError(
                        f"{method} {path} is ambiguous with {existing.pattern.pattern}"
                    )
            routes.append(route)
        return route

    def include(self, router: ApiRouter) -> None:
        for method, path, handler, status_code in router.routes:
            self.add(method, path, handler, status_code)

    def resolve(self, method: str, path: str) -> RouteMatch | None:
        method = method.upper()
        route = self._literal.get(method, {}).get(normalize_path(path))
        if route is not None:
            return RouteMatch(route, {})
        for route in self._parameterized.get(method, ()):
            params = route.pattern.match(path)
            if params is not None:
                return RouteMatch(route, params)
        return None

    def routes(self) -> list[Route]:
        result = []
        for method in METHODS:
            result.extend(self._literal.get(method, {}).values())
            result.extend(self._parameterized.get(method, []))
        return result
