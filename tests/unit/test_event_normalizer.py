import pytest

from middleware.event_normalizer import normalize_http_event
from models.event import EventVersion
from utils.error_handling import UnknownEventFormatError


def test_v1_defaults_parameter_mappings():
    event = {"httpMethod": "GET", "path": "/", "pathParameters": None}
    normalized = normalize_http_event(event)
    assert normalized["pathParameters"] == {}
    assert normalized["queryStringParameters"] == {}
    assert normalized["multiValueQueryStringParameters"] == {}
    assert event["pathParameters"] is None


def test_v2_has_no_multi_value_mapping():
    event = {"version": "2.0", "requestContext": {"http": {"method": "GET", "path": "/"}}}
    normalized = normalize_http_event(event)
    assert normalized["pathParameters"] == {}
    assert normalized["queryStringParameters"] == {}
    assert "multiValueQueryStringParameters" not in normalized


def test_existing_mappings_kept():
    query = {"q": "router"}
    normalized = normalize_http_event({"httpMethod": "GET", "path": "/", "queryStringParameters": query})
    assert normalized["queryStringParameters"] is query


@pytest.mark.parametrize(
    "event",
    [
        {"path": "/"},
        {"version": "2.0", "requestContext": {}},
        {"version": "2.0"},
        {"version": "9.9", "httpMethod": "GET", "path": "/"},
    ],
)
def test_rejects_non_http_events(event):
    with pytest.raises(UnknownEventFormatError):
        normalize_http_event(event)


class TestEventVersion:
    """Version detection and method/path extraction."""

    def test_version_defaults_to_v1(self):
        assert EventVersion.from_event({"httpMethod": "GET"}) is EventVersion.V1

    def test_v1_extraction(self):
        event = {"httpMethod": "post", "path": "/user/1"}
        assert EventVersion.V1.extract_route(event) == ("POST", "/user/1")

    def test_v2_extraction(self):
        event = {"version": "2.0", "requestContext": {"http": {"method": "DELETE", "path": "/a"}}}
        version = EventVersion.from_event(event)
        assert version is EventVersion.V2
        assert version.extract_route(event) == ("DELETE", "/a")

    def test_missing_path_is_root(self):
        assert EventVersion.V1.extract_route({"httpMethod": "GET"}) == ("GET", "/")
