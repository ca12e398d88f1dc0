"""
HTTP event normalizer.

Guarantees the parameter mappings handlers read from are present, whatever
payload version API Gateway sent. Runs before routing so the path-parameter
merge always has a target.
"""

from typing import Any, Dict

from models.event import EventVersion

PARAMETER_FIELDS = ("pathParameters", "queryStringParameters")


def normalize_http_event(event: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``event`` with missing parameter mappings defaulted to {}.

    Raises UnknownEventFormatError when the event is not an HTTP event.
    """
    version = EventVersion.from_event(event)

    normalized = dict(event)
    for field in PARAMETER_FIELDS:
        if normalized.get(field) is None:
            normalized[field] = {}
    if version is EventVersion.V1 and normalized.get("multiValueQueryStringParameters") is None:
        normalized["multiValueQueryStringParameters"] = {}
    return normalized
