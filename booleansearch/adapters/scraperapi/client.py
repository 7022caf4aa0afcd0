"""
ScraperAPI Client - Fetch search-results pages through the scraping proxy.

Features:
- Async HTTP client
- API key passed as a query parameter, target URL encoded as ``url``
- Upstream failures mapped onto the error taxonomy
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from booleansearch.config.errors import (
    CredentialsMissingError,
    UpstreamHTTPError,
    UpstreamUnavailableError,
)

if TYPE_CHECKING:
    from booleansearch.config import Settings

logger = logging.getLogger(__name__)

__all__ = ["ScraperAPIClient"]


class ScraperAPIClient:
    """
    ScraperAPI proxy client.

    Example:
        >>> client = ScraperAPIClient(api_key="secret")
        >>> html = await client.fetch("https://www.google.com/search?q=...")
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = "http://api.scraperapi.com/",
        timeout: float = 60.0,
    ) -> None:
        """
        Initialize ScraperAPI client.

        Args:
            api_key: ScraperAPI key (may be empty; fetch then fails)
            base_url: Proxy endpoint
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ScraperAPIClient:
        """Create a client from application settings."""
        return cls(
            api_key=settings.scraperapi_key,
            base_url=settings.scraperapi_url,
            timeout=settings.upstream_timeout,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
        return self._client

    async def fetch(self, url: str) -> str:
        """
        Fetch a page through the proxy.

        Args:
            url: Target page URL

        Returns:
            Response body as text

        Raises:
            CredentialsMissingError: No API key configured
            UpstreamHTTPError: Proxy answered with a non-2xx status
            UpstreamUnavailableError: Network or protocol failure
        """
        if not self.api_key:
            raise CredentialsMissingError()

        client = await self._get_client()

        try:
            response = await client.get(
                self.base_url,
                params={"api_key": self.api_key, "url": url},
            )
        except httpx.HTTPError as e:
            logger.error("ScraperAPI request failed: %s", e)
            raise UpstreamUnavailableError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            logger.error("ScraperAPI error: HTTP %d", response.status_code)
            raise UpstreamHTTPError(response.status_code)

        return response.text

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
