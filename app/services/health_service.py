"""Health monitoring service."""

from datetime import datetime
from enum import Enum

from app.config import config


class HealthStatus(str, Enum):
    """Health status enumeration."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


class HealthChecker:
    """Tracks reachability of the groupings API."""

    def __init__(self, unhealthy_threshold: int | None = None) -> None:
        """Initialize health checker.

        Args:
            unhealthy_threshold: Consecutive failures before unhealthy, from config if omitted
        """
        self.start_time = datetime.now()
        self.upstream_reachable: bool | None = None
        self.consecutive_failures = 0
        self.unhealthy_threshold = unhealthy_threshold or config.health.unhealthy_threshold

    def record_upstream(self, reachable: bool) -> None:
        """Record the outcome of an upstream request.

        Args:
            reachable: Whether the request succeeded
        """
        if reachable:
            self.consecutive_failures = 0
        else:
            self.consecutive_failures += 1
        self.upstream_reachable = reachable

    def get_status(self) -> HealthStatus:
        """Get current health status.

        Returns:
            HealthStatus enum value
        """
        if self.consecutive_failures >= self.unhealthy_threshold:
            return HealthStatus.UNHEALTHY
        if self.upstream_reachable is False:
            return HealthStatus.DEGRADED
        return HealthStatus.HEALTHY

    def get_uptime(self) -> float:
        """Get application uptime in seconds."""
        return (datetime.now() - self.start_time).total_seconds()


health_checker = HealthChecker()
