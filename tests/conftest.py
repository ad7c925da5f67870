"""Shared fixtures for announcement tests."""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

import httpx
import pytest

from app.clock import FixedClock
from app.config import GroupingsApiConfig
from app.external.groupings_api import GroupingsApiClient
from app.models.announcement import format_timestamp
from app.services.announcement_service import AnnouncementService

BEFORE_MESSAGE = "UH Groupings will be updated BEFORE."
AFTER_MESSAGE = "UH Groupings has been updated as of AFTER."


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 1, 15, 9, 30, 0)


@pytest.fixture
def fixed_clock(now: datetime) -> FixedClock:
    return FixedClock(now)


@pytest.fixture
def api_config() -> GroupingsApiConfig:
    """Upstream config that retries without sleeping."""
    return GroupingsApiConfig(
        base_url="http://groupings.test/api",
        announcements_path="/announcements",
        timeout=5,
        max_attempts=2,
        retry_min_wait=0,
        retry_max_wait=0,
    )


@pytest.fixture
def timeline_payload(now: datetime) -> dict[str, Any]:
    """BEFORE message active until now+5s, AFTER message starting at now+10s."""
    return {
        "resultCode": "SUCCESS",
        "announcements": [
            {
                "message": BEFORE_MESSAGE,
                "start": format_timestamp(now - timedelta(days=1)),
                "end": format_timestamp(now + timedelta(seconds=5)),
                "state": "Active",
            },
            {
                "message": AFTER_MESSAGE,
                "start": format_timestamp(now + timedelta(seconds=10)),
                "end": format_timestamp(now + timedelta(days=1)),
                "state": "Future",
            },
        ],
    }


@pytest.fixture
def make_service(
    api_config: GroupingsApiConfig, fixed_clock: FixedClock
) -> Callable[..., AnnouncementService]:
    """Build a service whose upstream is answered by the given handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> AnnouncementService:
        client = GroupingsApiClient(api_config, transport=httpx.MockTransport(handler))
        return AnnouncementService(client, fixed_clock)

    return _make
