"""Announcement service: fetches upstream announcements and classifies them."""

from collections.abc import Callable

from loguru import logger

from app.clock import Clock
from app.exceptions import GroupingsApiError, InvalidAnnouncementError
from app.external.groupings_api import GroupingsApiClient
from app.models.announcement import (
    Announcement,
    AnnouncementsResult,
    AnnouncementState,
    ClassifiedAnnouncement,
)

SUCCESS = "SUCCESS"


class AnnouncementService:
    """Service for reading announcements with their current state."""

    def __init__(self, client: GroupingsApiClient, clock: Clock) -> None:
        """Initialize announcement service.

        Args:
            client: Upstream groupings API client
            clock: Source of the reference instant
        """
        self.client = client
        self.clock = clock

    async def get_announcements(self) -> AnnouncementsResult:
        """Fetch announcements and classify them against the current instant.

        States are recomputed on every call; nothing is cached between calls.

        Returns:
            AnnouncementsResult in upstream order

        Raises:
            GroupingsApiError: If the upstream request fails or reports failure
        """
        payload = await self.client.fetch_announcements()

        result_code = payload.get("resultCode", SUCCESS)
        if result_code != SUCCESS:
            raise GroupingsApiError(f"Groupings API returned resultCode {result_code!r}")

        entries = payload.get("announcements")
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise GroupingsApiError("Announcements field is not a list")

        announcements = []
        for entry in entries:
            try:
                announcements.append(Announcement.from_payload(entry))
            except InvalidAnnouncementError as e:
                logger.warning(f"Skipping announcement: {e}")

        now = self.clock.now()
        classified = [ClassifiedAnnouncement(a, a.state_at(now)) for a in announcements]

        logger.debug(f"Classified {len(classified)} announcements at {now.isoformat()}")
        return AnnouncementsResult(result_code=SUCCESS, announcements=classified, observed_at=now)

    async def get_active_messages(self) -> list[str]:
        """Messages of announcements active right now."""
        result = await self.get_announcements()
        return [a.announcement.message for a in result.in_state(AnnouncementState.ACTIVE)]


announcement_service: AnnouncementService | None = None


def get_announcement_service(
    factory: Callable[[], tuple[GroupingsApiClient, Clock]],
) -> AnnouncementService:
    """Get or create announcement service singleton.

    Args:
        factory: Builds the upstream client and clock, called only on first use

    Returns:
        AnnouncementService instance
    """
    global announcement_service
    if announcement_service is None:
        client, clock = factory()
        announcement_service = AnnouncementService(client, clock)
    return announcement_service


async def reset_announcement_service() -> None:
    """Close and drop the announcement service singleton."""
    global announcement_service
    if announcement_service is not None:
        await announcement_service.client.aclose()
    announcement_service = None
