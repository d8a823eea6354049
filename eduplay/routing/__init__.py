from eduplay.routing.context import RequestContext
from eduplay.routing.dispatcher import Dispatcher
from eduplay.routing.table import ApiRouter, Route, RouteMatch, RoutePattern, RouteTable

__all__ = [
    "ApiRouter",
    "Dispatcher",
    "RequestContext",
    "Route",
    "RouteMatch",
    "RoutePattern",
    "RouteTable",
]
