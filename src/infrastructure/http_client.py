"""Async HTTP client for judge APIs."""

from typing import Any

from curl_cffi import CurlError
from curl_cffi.requests import AsyncSession
from loguru import logger

from domain.exceptions import FetchError


class AsyncHTTPClient:
    """Thin JSON-over-HTTP client built on curl_cffi."""

    def __init__(self, timeout: float | None = None):
        """
        Initialize client.

        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
        """
        self.timeout = timeout

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET ``url`` and decode the JSON body.

        Error statuses whose body is still JSON are returned as-is, since judges
        describe failures inside the payload.

        Raises:
            FetchError: On transport failure or a body that is not JSON
        """
        logger.debug(f"GET {url} params={params}")

        # A fresh session per request keeps curl handles from outliving the event loop
        try:
            async with AsyncSession(timeout=self.timeout) as session:
                response = await session.get(url, params=params)
        except CurlError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise FetchError(f"Request failed: {url}") from e

        if response.status_code >= 400:
            logger.warning(f"GET {url} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON from {url} (HTTP {response.status_code})")
            raise FetchError(f"Invalid response from {url} (HTTP {response.status_code})") from e
