"""Announcement domain models."""

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any

from app.exceptions import InvalidAnnouncementError

TIMESTAMP_FORMAT = "%Y%m%dT%H%M%S"
TIMESTAMP_PATTERN = re.compile(r"[0-9]{8}T[0-9]{6}")


class AnnouncementState(str, Enum):
    """Temporal state of an announcement relative to a reference instant."""

    FUTURE = "Future"
    ACTIVE = "Active"
    EXPIRED = "Expired"


def classify_state(start: datetime, end: datetime, now: datetime) -> AnnouncementState:
    """Classify a closed window [start, end] against a reference instant.

    Args:
        start: Window start (inclusive)
        end: Window end (inclusive)
        now: Reference instant

    Returns:
        FUTURE before start, EXPIRED after end, ACTIVE otherwise
    """
    if now < start:
        return AnnouncementState.FUTURE
    if now > end:
        return AnnouncementState.EXPIRED
    return AnnouncementState.ACTIVE


def parse_timestamp(value: str | None) -> datetime:
    """Parse a yyyyMMdd'T'HHmmss wire timestamp.

    Raises:
        InvalidAnnouncementError: If the value is missing or malformed
    """
    if not isinstance(value, str):
        raise InvalidAnnouncementError(f"Timestamp must be a string, got {value!r}")
    if not TIMESTAMP_PATTERN.fullmatch(value):
        raise InvalidAnnouncementError(f"Malformed timestamp {value!r}")
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidAnnouncementError(f"Malformed timestamp {value!r}") from e


def format_timestamp(value: datetime) -> str:
    """Format a datetime in the yyyyMMdd'T'HHmmss wire format."""
    return value.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class Announcement:
    """Banner message shown within a validity window."""

    message: str
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidAnnouncementError(
                f"Announcement {self.message!r} ends before it starts"
            )

    def state_at(self, now: datetime) -> AnnouncementState:
        """State of this announcement at the given instant."""
        return classify_state(self.start, self.end, now)

    @classmethod
    def from_payload(cls, payload: Any) -> "Announcement":
        """Build an announcement from one upstream entry.

        Any state reported upstream is ignored; it is recomputed on read.

        Args:
            payload: Mapping with message, start and end keys

        Returns:
            Announcement instance

        Raises:
            InvalidAnnouncementError: If the entry is incomplete or malformed
        """
        if not isinstance(payload, dict):
            raise InvalidAnnouncementError(f"Announcement entry must be an object: {payload!r}")

        message = payload.get("message")
        if not isinstance(message, str):
            raise InvalidAnnouncementError(f"Announcement entry has no message: {payload!r}")

        return cls(
            message=message,
            start=parse_timestamp(payload.get("start")),
            end=parse_timestamp(payload.get("end")),
        )

    def __str__(self) -> str:
        return f"{self.message} [{format_timestamp(self.start)} - {format_timestamp(self.end)}]"


@dataclass(frozen=True)
class ClassifiedAnnouncement:
    """Announcement paired with the state observed at one instant."""

    announcement: Announcement
    state: AnnouncementState

    def to_dict(self) -> dict[str, str]:
        return {
            "message": self.announcement.message,
            "start": format_timestamp(self.announcement.start),
            "end": format_timestamp(self.announcement.end),
            "state": self.state.value,
        }


@dataclass
class AnnouncementsResult:
    """Announcements classified against a single reference instant."""

    result_code: str
    announcements: list[ClassifiedAnnouncement]
    observed_at: datetime

    def in_state(self, state: AnnouncementState) -> list[ClassifiedAnnouncement]:
        return [a for a in self.announcements if a.state == state]
