"""API v1 router - aggregates all domain routers."""

from fastapi import APIRouter

from app.api.v1.announcements.router import router as announcements_router
from app.api.v1.health.router import router as health_router

router = APIRouter()

router.include_router(health_router)
router.include_router(announcements_router)
