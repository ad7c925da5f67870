"""Client for the upstream groupings API announcements resource."""

from typing import Any

import httpx
from httpx import AsyncClient
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.config import GroupingsApiConfig
from app.exceptions import GroupingsApiError


class GroupingsApiClient:
    """Fetches announcement payloads from the groupings API."""

    def __init__(
        self,
        config: GroupingsApiConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize groupings API client.

        Args:
            config: Upstream connection configuration
            transport: Optional httpx transport, used to stub the upstream
        """
        self.config = config
        self.transport = transport
        self.client: AsyncClient | None = None

    def _get_client(self) -> AsyncClient:
        if self.client is None:
            self.client = AsyncClient(
                timeout=self.config.timeout,
                follow_redirects=True,
                transport=self.transport,
                headers={"Accept": "application/json"},
            )
        return self.client

    async def _get(self, url: str) -> httpx.Response:
        response = await self._get_client().get(url)
        logger.debug(f"Response status: {response.status_code}")
        response.raise_for_status()
        return response

    async def fetch_announcements(self) -> dict[str, Any]:
        """Fetch the raw announcements payload.

        Returns:
            Decoded JSON object

        Raises:
            GroupingsApiError: If the request fails or the body is not a JSON object
        """
        url = self.config.announcements_url
        logger.info(f"Fetching announcements from {url}")

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.config.max_attempts),
                wait=wait_exponential(
                    multiplier=1,
                    min=self.config.retry_min_wait,
                    max=self.config.retry_max_wait,
                ),
                retry=retry_if_exception_type(httpx.HTTPError),
                reraise=True,
            ):
                with attempt:
                    response = await self._get(url)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch announcements from {url}: {e}")
            raise GroupingsApiError(f"Announcements request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise GroupingsApiError("Announcements response is not valid JSON") from e

        if not isinstance(payload, dict):
            raise GroupingsApiError("Announcements response is not a JSON object")

        return payload

    async def aclose(self) -> None:
        """Close HTTP client."""
        if self.client:
            await self.client.aclose()
            self.client = None
            logger.info("Closed groupings API HTTP client")
