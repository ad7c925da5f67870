"""Main application entry point."""

import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from loguru import logger

from app import __version__
from app.api.v1.router import router as api_router
from app.config import config
from app.services.announcement_service import reset_announcement_service


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager.

    Args:
        app: FastAPI instance

    Yields:
        None
    """
    await startup()

    yield

    await shutdown()


app = FastAPI(
    title="groupings-announcements",
    description="Announcement banners for UH Groupings with time-based state",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.include_router(api_router)


async def startup() -> None:
    """Initialize application components."""
    _setup_logging()
    logger.info("Starting groupings-announcements...")
    logger.info(f"Groupings API: {config.groupings_api.announcements_url}")
    logger.info(f"Announcement timezone: {config.announcements.timezone}")


def _setup_logging() -> None:
    """Configure logging."""
    log_level = config.logging.level
    logger.remove()

    if config.logging.json_format:
        logger.add(
            sys.stdout,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>",
        )

    log_path = Path(config.logging.file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"File logging disabled, cannot create {log_path.parent}: {e}")
        return

    logger.add(
        log_path,
        level=log_level,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        compression="zip",
        serialize=config.logging.json_format,
    )

    logger.info(f"Logging configured at {log_level} level")


async def shutdown() -> None:
    """Gracefully shutdown application."""
    logger.info("Shutting down application...")

    try:
        await reset_announcement_service()
        logger.info("Application shutdown complete")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8080,
        log_config=None,
        access_log=False,
    )
