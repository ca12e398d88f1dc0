"""Health check route served through the router."""

import json
from datetime import datetime, timezone

from utils.settings import RouterSettings


def lambda_handler(event, context):
    """Return 200 with the deployment environment."""
    settings = RouterSettings.from_environment()
    return {
        "statusCode": 200,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(
            {
                "status": "ok",
                "environment": settings.environment,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        ),
    }
