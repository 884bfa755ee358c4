"""
Flubr Client - HTTP wrapper for the flubr random-image service.

Follows the CxdbClient pattern: httpx.AsyncClient, lazy init, typed errors.
"""

import httpx
import logging
from typing import Optional

from flubr.exceptions import FlubrApiError, FlubrConnectionError

logger = logging.getLogger(__name__)


class FlubrClient:
    """Async HTTP client for the flubr image service."""

    def __init__(self, base_url: str, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self.client: Optional[httpx.AsyncClient] = None

    async def _ensure_client(self):
        """Ensure async client is initialized (lazy init)."""
        if not self.client:
            self.client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    def image_url(self, label: str) -> str:
        """Return the random-image endpoint for a label ("pass" or "fail")."""
        return f"{self.base_url}/api/images/random/{label}"

    async def fetch_random_image(self, label: str) -> str:
        """Fetch a random image for a label.

        Args:
            label: Classification label, used verbatim in the URL.

        Returns:
            The raw response body.

        Raises:
            FlubrConnectionError: If the service is unreachable or times out.
            FlubrApiError: If the service answers with anything but 200.
        """
        await self._ensure_client()
        url = self.image_url(label)
        try:
            response = await self.client.get(url)
        except httpx.TransportError as e:
            raise FlubrConnectionError(f"Cannot reach flubr at {url}: {e}") from e

        if response.status_code != 200:
            raise FlubrApiError(
                f"flubr returned HTTP {response.status_code} for {url}",
                status_code=response.status_code,
            )

        logger.debug(f"Fetched {label} image from {url} ({len(response.text)} chars)")
        return response.text

    async def close(self):
        """Close the HTTP client."""
        if self.client:
            await self.client.aclose()
            self.client = None
