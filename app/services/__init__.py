"""Business logic services."""

from app.services.announcement_service import (
    AnnouncementService,
    get_announcement_service,
    reset_announcement_service,
)
from app.services.health_service import HealthChecker, HealthStatus, health_checker

__all__ = [
    "AnnouncementService",
    "get_announcement_service",
    "reset_announcement_service",
    "HealthChecker",
    "HealthStatus",
    "health_checker",
]
