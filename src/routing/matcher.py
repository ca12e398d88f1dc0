"""
Route resolution against a compiled table.

Routes are tried in declaration order and the first one that passes both
the method gate and the structural walk wins. There is no specificity
ranking: an earlier ``/user/{id}`` is preferred over a later ``/user/me``
whenever both can match.
"""

from typing import Dict, List, Optional, Sequence

from models.route import CompiledRoute, RouteMatch, RouteTable, Segment, SegmentKind
from routing.compiler import split_path
from utils.error_handling import RouteNotFoundError
from utils.logging_config import get_logger

logger = get_logger(__name__)


def _bind_segments(
    segments: Sequence[Segment], parts: List[str]
) -> Optional[Dict[str, str]]:
    """Walk pattern segments against request segments.

    Returns the parameter bindings, or None when the route does not match.
    """
    params: Dict[str, str] = {}
    index = 0

    for segment in segments:
        if segment.kind is SegmentKind.WILDCARD:
            # Only ever last; absorbs whatever is left, possibly nothing.
            params[segment.value] = "/".join(parts[index:])
            return params

        if index >= len(parts):
            return None

        part = parts[index]
        if segment.kind is SegmentKind.LITERAL:
            if part != segment.value:
                return None
        elif not part:
            return None
        else:
            params[segment.value] = part
        index += 1

    if index != len(parts):
        return None
    return params


def match_route(table: RouteTable, method: str, path: str) -> Optional[RouteMatch]:
    """Return the first route matching method and path, or None."""
    method = method.upper()
    parts = split_path(path)

    route: CompiledRoute
    for route in table:
        if not route.accepts(method):
            continue
        params = _bind_segments(route.segments, parts)
        if params is not None:
            return RouteMatch(route=route, path_parameters=params)
    return None


def resolve_route(table: RouteTable, method: str, path: str) -> RouteMatch:
    """Resolve method and path, raising RouteNotFoundError when nothing matches."""
    match = match_route(table, method, path)
    if match is None:
        logger.info("Route not found", extra={"method": method, "path": path})
        raise RouteNotFoundError()

    logger.debug(
        "Route matched",
        extra={"method": method, "path": path, "route": match.route.path},
    )
    return match
