"""Pydantic models for routes and API Gateway events."""

from models.event import DEFAULT_EVENT_VERSION, EventVersion  # noqa: F401
from models.route import (  # noqa: F401
    CompiledRoute,
    HttpMethod,
    RouteDeclaration,
    RouteMatch,
    RouteTable,
    Segment,
    SegmentKind,
)
