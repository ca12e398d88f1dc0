"""Route declaration and compiled route models."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Iterator, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HttpMethod(str, Enum):
    """Methods a route may declare. ANY matches every request method."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    ANY = "ANY"


class SegmentKind(str, Enum):
    """How a compiled path segment consumes request segments."""

    LITERAL = "literal"
    PARAM = "param"
    WILDCARD = "wildcard"


class Segment(BaseModel):
    """One slash-delimited piece of a compiled route pattern.

    ``value`` holds the literal text for literal segments and the parameter
    name for param/wildcard segments.
    """

    model_config = ConfigDict(frozen=True)

    kind: SegmentKind
    value: str


class RouteDeclaration(BaseModel):
    """A route as supplied by the caller: method, path pattern, handler."""

    model_config = ConfigDict(frozen=True)

    # Checked against HttpMethod at compile time, not here, so any bad value
    # surfaces as InvalidMethodError.
    method: Any
    path: str
    handler: Callable[..., Any]

    @field_validator("method")
    @classmethod
    def upper_case_method(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class CompiledRoute(BaseModel):
    """A declaration compiled into matchable segments."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    path: str
    segments: Tuple[Segment, ...] = ()
    handler: Callable[..., Any]

    def accepts(self, method: str) -> bool:
        """Method gate applied before any structural matching."""
        return self.method is HttpMethod.ANY or self.method.value == method


class RouteTable(BaseModel):
    """Ordered, read-only collection of compiled routes."""

    model_config = ConfigDict(frozen=True)

    routes: Tuple[CompiledRoute, ...] = ()

    def __iter__(self) -> Iterator[CompiledRoute]:  # type: ignore[override]
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)


class RouteMatch(BaseModel):
    """Result of a successful resolution."""

    model_config = ConfigDict(frozen=True)

    route: CompiledRoute
    path_parameters: Dict[str, str] = Field(default_factory=dict)

    @property
    def handler(self) -> Callable[..., Any]:
        return self.route.handler
