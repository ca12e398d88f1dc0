"""Router exceptions and a helper for consistent error responses."""

import json
from typing import Any, Dict


class AppError(Exception):
    """Base class for router errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code

    @property
    def message(self) -> str:
        return str(self)


class InvalidMethodError(AppError):
    """Raised at compile time when a route declares an unsupported method."""

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message, status_code=405)


class InvalidRouteError(AppError):
    """Raised at compile time when a route path cannot be compiled."""

    def __init__(self, message: str = "Invalid route path"):
        super().__init__(message, status_code=500)


class RouteNotFoundError(AppError):
    """Raised when no compiled route matches the request method and path."""

    def __init__(self, message: str = "Route does not exist"):
        super().__init__(message, status_code=404)


class UnknownEventFormatError(AppError):
    """Raised when an event is not a recognised API Gateway HTTP event."""

    def __init__(self, message: str = "Unknown http event format"):
        super().__init__(message, status_code=400)


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return {
        "statusCode": error.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps({"message": str(error), "status": "error"}),
    }
