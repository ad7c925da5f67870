"""FastAPI dependency helpers."""

from app.clock import Clock, SystemClock
from app.config import Config, config
from app.external.groupings_api import GroupingsApiClient
from app.services.announcement_service import AnnouncementService, get_announcement_service
from app.services.health_service import HealthChecker


def get_config() -> Config:
    """Get config for FastAPI dependency injection.

    Returns:
        Config singleton (module-level)
    """
    return config


def get_clock() -> Clock:
    """Get the wall clock in the configured announcements timezone."""
    return SystemClock(config.announcements.timezone)


def get_service() -> AnnouncementService:
    """Get announcement service for FastAPI dependency injection.

    Returns:
        AnnouncementService singleton (module-level)
    """
    return get_announcement_service(_build_service_parts)


def _build_service_parts() -> tuple[GroupingsApiClient, Clock]:
    return GroupingsApiClient(config.groupings_api), get_clock()


def get_health_checker() -> HealthChecker:
    """Get health checker for FastAPI dependency injection.

    Returns:
        HealthChecker singleton (module-level)
    """
    from app.services.health_service import health_checker

    return health_checker
