"""Route compilation, matching and dispatch for API Gateway events."""

from routing.compiler import compile_routes, parse_path, split_path  # noqa: F401
from routing.matcher import match_route, resolve_route  # noqa: F401
from routing.router import HttpRouter, http_router  # noqa: F401
