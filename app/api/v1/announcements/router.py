"""API router for announcements with their current state."""

from collections.abc import Awaitable
from typing import Literal, TypeVar

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from app.container import get_health_checker, get_service
from app.exceptions import GroupingsApiError
from app.services.announcement_service import SUCCESS, AnnouncementService
from app.services.health_service import HealthChecker

T = TypeVar("T")

router = APIRouter(prefix="/announcements", tags=["announcements"])


class AnnouncementResponse(BaseModel):
    """One announcement on the wire."""

    message: str
    start: str = Field(..., description="yyyyMMdd'T'HHmmss")
    end: str = Field(..., description="yyyyMMdd'T'HHmmss")
    state: Literal["Future", "Active", "Expired"]


class AnnouncementsResponse(BaseModel):
    """Response model for the announcements listing."""

    model_config = ConfigDict(populate_by_name=True)

    result_code: str = Field(..., alias="resultCode")
    announcements: list[AnnouncementResponse] = Field(default_factory=list)


class ActiveMessagesResponse(BaseModel):
    """Response model for currently active messages."""

    model_config = ConfigDict(populate_by_name=True)

    result_code: str = Field(..., alias="resultCode")
    messages: list[str] = Field(default_factory=list)


async def _upstream_call(call: Awaitable[T], health: HealthChecker) -> T:
    try:
        result = await call
    except GroupingsApiError as e:
        health.record_upstream(False)
        logger.error(f"Announcements unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Announcements unavailable: {e}",
        ) from e

    health.record_upstream(True)
    return result


@router.get("", response_model=AnnouncementsResponse, response_model_by_alias=True)
async def get_announcements(
    service: AnnouncementService = Depends(get_service),
    health: HealthChecker = Depends(get_health_checker),
) -> AnnouncementsResponse:
    """List announcements with state computed at request time."""
    result = await _upstream_call(service.get_announcements(), health)

    return AnnouncementsResponse(
        result_code=result.result_code,
        announcements=[AnnouncementResponse(**a.to_dict()) for a in result.announcements],
    )


@router.get("/active", response_model=ActiveMessagesResponse, response_model_by_alias=True)
async def get_active_announcements(
    service: AnnouncementService = Depends(get_service),
    health: HealthChecker = Depends(get_health_checker),
) -> ActiveMessagesResponse:
    """List messages of announcements that are active right now."""
    messages = await _upstream_call(service.get_active_messages(), health)

    return ActiveMessagesResponse(result_code=SUCCESS, messages=messages)
