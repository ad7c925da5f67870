"""Health check endpoint for monitoring."""

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from app import __version__
from app.container import get_health_checker
from app.services.health_service import HealthChecker, HealthStatus

router = APIRouter(prefix="/health", tags=["health"])


class HealthResponse(BaseModel):
    """Health check response model."""

    status: HealthStatus
    timestamp: datetime
    upstream_reachable: bool | None
    consecutive_failures: int
    uptime_seconds: float
    version: str


@router.get("", response_model=HealthResponse)
async def health_check(health: HealthChecker = Depends(get_health_checker)) -> HealthResponse:
    """Health check endpoint.

    Returns:
        HealthResponse with current status
    """
    return HealthResponse(
        status=health.get_status(),
        timestamp=datetime.now(),
        upstream_reachable=health.upstream_reachable,
        consecutive_failures=health.consecutive_failures,
        uptime_seconds=health.get_uptime(),
        version=__version__,
    )


@router.get("/ready")
async def readiness_check(
    health: HealthChecker = Depends(get_health_checker),
) -> dict[str, bool | HealthStatus]:
    """Readiness check endpoint.

    Raises:
        HTTPException: If the groupings API has been failing
    """
    health_status = health.get_status()

    if health_status == HealthStatus.UNHEALTHY:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Service unhealthy: {health.consecutive_failures} consecutive failures",
        )

    return {"ready": True, "status": health_status}


@router.get("/live")
async def liveness_check(
    health: HealthChecker = Depends(get_health_checker),
) -> dict[str, bool | float]:
    """Liveness check endpoint."""
    return {"alive": True, "uptime_seconds": health.get_uptime()}
