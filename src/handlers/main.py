"""
Single entrypoint Lambda that routes API Gateway requests to handlers.

The router is built at import time so a bad route declaration fails the
cold start instead of the first request. Router errors are turned into
proxy responses here; handler errors are left to Lambda.
"""

import json
from typing import Any, Dict

from routing import http_router
from utils.error_handling import AppError, to_response
from utils.logging_config import get_logger

from . import health_check

logger = get_logger(__name__)


def _response(status: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Format a JSON API Gateway proxy response."""
    return {
        "statusCode": status,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def echo_handler(event, context):
    """Return the parameters the router bound for this request."""
    return _response(
        200,
        {
            "pathParameters": event.get("pathParameters") or {},
            "queryStringParameters": event.get("queryStringParameters") or {},
        },
    )


ROUTES = [
    {"method": "GET", "path": "/health", "handler": health_check.lambda_handler},
    {"method": "ANY", "path": "/echo/{proxy+}", "handler": echo_handler},
]

router = http_router(ROUTES)


def lambda_handler(event, context):
    """Entry point invoked by API Gateway (REST or HTTP API)."""
    try:
        return router(event, context)
    except AppError as exc:
        logger.info(
            "Request rejected by router",
            extra={"status_code": exc.status_code, "error": str(exc)},
        )
        return to_response(exc)
