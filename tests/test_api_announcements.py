"""Test announcements API endpoints."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.container import get_health_checker, get_service
from app.main import app
from app.services.health_service import HealthChecker
from tests.conftest import AFTER_MESSAGE, BEFORE_MESSAGE


def _find(announcements: list[dict], message: str) -> dict | None:
    for announcement in announcements:
        if announcement["message"] == message:
            return announcement
    return None


@pytest.fixture
def health() -> HealthChecker:
    return HealthChecker(unhealthy_threshold=2)


@pytest.fixture
def client_for(make_service, health):
    """TestClient whose announcement service is answered by the given handler."""

    def _client(handler) -> TestClient:
        service = make_service(handler)
        app.dependency_overrides[get_service] = lambda: service
        app.dependency_overrides[get_health_checker] = lambda: health
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_announcement_timing_transitions(client_for, fixed_clock, timeline_payload):
    """Test BEFORE expires and AFTER activates once the clock passes their bounds."""
    client = client_for(lambda request: httpx.Response(200, json=timeline_payload))

    response = client.get("/announcements")
    assert response.status_code == 200
    data = response.json()
    assert data["resultCode"] == "SUCCESS"
    assert len(data["announcements"]) == 2
    assert _find(data["announcements"], BEFORE_MESSAGE)["state"] == "Active"
    assert _find(data["announcements"], AFTER_MESSAGE)["state"] == "Future"

    fixed_clock.advance(seconds=11)

    response = client.get("/announcements")
    assert response.status_code == 200
    announcements = response.json()["announcements"]
    assert len(announcements) == 2
    assert _find(announcements, AFTER_MESSAGE)["state"] == "Active"
    assert _find(announcements, BEFORE_MESSAGE)["state"] == "Expired"


def test_announcement_wire_format(client_for, timeline_payload):
    """Test timestamps are echoed in yyyyMMdd'T'HHmmss format."""
    client = client_for(lambda request: httpx.Response(200, json=timeline_payload))

    before = _find(client.get("/announcements").json()["announcements"], BEFORE_MESSAGE)

    assert before == {
        "message": BEFORE_MESSAGE,
        "start": "20240114T093000",
        "end": "20240115T093005",
        "state": "Active",
    }


def test_active_announcements(client_for, fixed_clock, timeline_payload):
    """Test the active endpoint lists only active messages."""
    client = client_for(lambda request: httpx.Response(200, json=timeline_payload))

    assert client.get("/announcements/active").json() == {
        "resultCode": "SUCCESS",
        "messages": [BEFORE_MESSAGE],
    }

    fixed_clock.advance(seconds=11)
    assert client.get("/announcements/active").json()["messages"] == [AFTER_MESSAGE]


def test_upstream_failure_returns_bad_gateway(client_for, health):
    """Test upstream errors map to 502 and degrade health."""
    client = client_for(lambda request: httpx.Response(500))

    response = client.get("/announcements")

    assert response.status_code == 502
    assert "Announcements unavailable" in response.json()["detail"]
    assert health.consecutive_failures == 1
    assert client.get("/health").json()["status"] == "degraded"

    client.get("/announcements/active")
    assert client.get("/health").json()["status"] == "unhealthy"
    assert client.get("/health/ready").status_code == 503


def test_health_endpoint(client_for, timeline_payload):
    """Test health reports upstream reachability after a good request."""
    client = client_for(lambda request: httpx.Response(200, json=timeline_payload))

    client.get("/announcements")
    data = client.get("/health").json()

    assert data["status"] == "healthy"
    assert data["upstream_reachable"] is True
    assert data["consecutive_failures"] == 0
    assert "uptime_seconds" in data
    assert client.get("/health/ready").json()["ready"] is True
    assert client.get("/health/live").json()["alive"] is True
