"""
Route table compilation.

Declarations are compiled once, at router construction. Every failure here
(unknown method, misplaced greedy parameter) surfaces before the first
request is served.
"""

from typing import Any, Iterable, List, Mapping, Union

from models.route import (
    CompiledRoute,
    HttpMethod,
    RouteDeclaration,
    RouteTable,
    Segment,
    SegmentKind,
)
from utils.error_handling import InvalidMethodError, InvalidRouteError
from utils.logging_config import get_logger

logger = get_logger(__name__)

Declaration = Union[RouteDeclaration, Mapping[str, Any]]


def split_path(path: str) -> List[str]:
    """Split a path or pattern into segments.

    Leading and trailing slashes are ignored, so ``/user/`` and ``/user``
    split identically and ``/`` yields no segments at all. Interior empty
    segments (``/a//b``) are kept.
    """
    stripped = path.strip("/")
    if not stripped:
        return []
    return stripped.split("/")


def parse_segment(text: str) -> Segment:
    """Classify one pattern segment as literal, param or wildcard."""
    if text.startswith("{") and text.endswith("}"):
        inner = text[1:-1]
        kind = SegmentKind.PARAM
        if inner.endswith("+"):
            kind = SegmentKind.WILDCARD
            inner = inner[:-1]
        if not inner:
            raise InvalidRouteError(f"Path parameter {text} has no name")
        return Segment(kind=kind, value=inner)
    return Segment(kind=SegmentKind.LITERAL, value=text)


def parse_path(path: str) -> List[Segment]:
    """Parse a route pattern into segment descriptors.

    Examples::

        "/"                  -> []
        "/user/{id}"         -> [literal("user"), param("id")]
        "/path/{proxy+}"     -> [literal("path"), wildcard("proxy")]
    """
    segments = [parse_segment(part) for part in split_path(path)]
    for position, segment in enumerate(segments):
        if segment.kind is SegmentKind.WILDCARD and position != len(segments) - 1:
            raise InvalidRouteError(
                f"Greedy parameter {{{segment.value}+}} must be the last segment of {path}"
            )
    return segments


def compile_route(declaration: Declaration) -> CompiledRoute:
    """Compile a single declaration; raises InvalidMethodError on bad methods."""
    if not isinstance(declaration, RouteDeclaration):
        declaration = RouteDeclaration.model_validate(declaration)

    try:
        method = HttpMethod(declaration.method)
    except (ValueError, TypeError):
        raise InvalidMethodError() from None

    return CompiledRoute(
        method=method,
        path=declaration.path,
        segments=tuple(parse_path(declaration.path)),
        handler=declaration.handler,
    )


def compile_routes(declarations: Iterable[Declaration]) -> RouteTable:
    """Compile declarations into a table, keeping declaration order."""
    table = RouteTable(routes=tuple(compile_route(d) for d in declarations))
    logger.debug("Route table compiled", extra={"route_count": len(table)})
    return table
