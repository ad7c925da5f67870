"""Reference instant providers used to classify announcements."""

from datetime import datetime, timedelta
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current reference instant."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in the timezone the wire timestamps are expressed in."""

    def __init__(self, timezone: str) -> None:
        """Initialize system clock.

        Args:
            timezone: IANA timezone name
        """
        self.timezone = ZoneInfo(timezone)

    def now(self) -> datetime:
        """Current local time, naive so it compares with wire timestamps."""
        return datetime.now(self.timezone).replace(tzinfo=None)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, **delta: float) -> datetime:
        """Move forward by a timedelta expressed as keyword arguments.

        Returns:
            The new instant
        """
        self._instant += timedelta(**delta)
        return self._instant
