"""
Environment-specific router settings.

Read once per cold start; the router never re-reads the environment.
"""

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class RouterSettings:
    """Runtime settings for the HTTP router."""

    # Environment
    environment: str = "dev"

    # Logging
    log_level: str = "INFO"

    # Default pathParameters/queryStringParameters before routing
    normalize_events: bool = True

    @classmethod
    def from_environment(cls) -> "RouterSettings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        normalize = os.environ.get("ROUTER_NORMALIZE_EVENTS", "true").lower() == "true"
        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Production keeps logs quiet unless overridden
        if env == "prod" and "LOG_LEVEL" not in os.environ:
            log_level = "WARNING"

        return cls(environment=env, log_level=log_level, normalize_events=normalize)
