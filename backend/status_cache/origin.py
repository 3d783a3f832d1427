"""
Origin Client

Fetches status images from the remote origin when they are not cached.
Any non-success response or transport error counts as "not at origin".
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "status-cache/1.0",
    "Accept": "image/*,*/*;q=0.8",
}


def build_http_client(timeout: float) -> httpx.AsyncClient:
    """HTTP client used for origin fetches."""
    return httpx.AsyncClient(
        timeout=timeout,
        follow_redirects=True,
        headers=DEFAULT_HEADERS,
    )


class OriginClient:
    """Looks up `{base_url}/{key}` on the origin."""

    def __init__(self, base_url: str, http_client: httpx.AsyncClient):
        self.base_url = base_url.rstrip("/")
        self._http = http_client

    def url_for(self, key: str) -> str:
        return f"{self.base_url}/{key}"

    async def fetch(self, key: str) -> Optional[bytes]:
        """
        Fetch the image for `key` from the origin.

        Returns:
            Image bytes on a 2xx response, None otherwise.
        """
        url = self.url_for(key)
        try:
            logger.info(f"[Origin] Fetching: {url}")
            response = await self._http.get(url)
            response.raise_for_status()
        except httpx.TimeoutException:
            logger.error(f"[Origin] Timeout: {url}")
            return None
        except httpx.HTTPStatusError as e:
            logger.error(f"[Origin] HTTP error {e.response.status_code}: {url}")
            return None
        except httpx.HTTPError as e:
            logger.error(f"[Origin] Fetch error: {url}: {e}")
            return None

        logger.info(f"[Origin] Fetched: {url} ({len(response.content)} bytes)")
        return response.content

    async def aclose(self) -> None:
        await self._http.aclose()
