"""API Gateway event payload versions."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple

from utils.error_handling import UnknownEventFormatError

DEFAULT_EVENT_VERSION = "1.0"


class EventVersion(str, Enum):
    """Supported API Gateway proxy payload formats.

    ``1.0`` is the REST API (and HTTP API v1) payload with top-level
    ``httpMethod``/``path``; ``2.0`` is the HTTP API payload that nests them
    under ``requestContext.http``.
    """

    V1 = "1.0"
    V2 = "2.0"

    @classmethod
    def from_event(cls, event: Dict[str, Any]) -> "EventVersion":
        """Pick the payload version, rejecting unknown versions and shapes."""
        version = event.get("version") or DEFAULT_EVENT_VERSION
        try:
            resolved = cls(version)
        except ValueError:
            raise UnknownEventFormatError() from None

        if resolved.method_of(event) is None:
            raise UnknownEventFormatError()
        return resolved

    def method_of(self, event: Dict[str, Any]) -> Optional[str]:
        if self is EventVersion.V1:
            return event.get("httpMethod")
        return _http_context(event).get("method")

    def path_of(self, event: Dict[str, Any]) -> str:
        if self is EventVersion.V1:
            return event.get("path") or "/"
        return _http_context(event).get("path") or "/"

    def extract_route(self, event: Dict[str, Any]) -> Tuple[str, str]:
        """Return the upper-cased method and raw path of the event."""
        method = self.method_of(event)
        if method is None:
            raise UnknownEventFormatError()
        return method.upper(), self.path_of(event)


def _http_context(event: Dict[str, Any]) -> Dict[str, Any]:
    request_context = event.get("requestContext") or {}
    return request_context.get("http") or {}
