"""Polymarket web client for fetching event pages."""

from __future__ import annotations

from beartype import beartype
from httpx import AsyncBaseTransport, AsyncClient

from ladder_scanner.extractors.url_builder import build_event_url
from ladder_scanner.utils.config import POLYMARKET_WEB_URL, REQUEST_TIMEOUT, USER_AGENT


class AsyncPolymarketPageClient:
    """Async client for fetching server-rendered Polymarket pages."""

    def __init__(
        self,
        base_url: str = POLYMARKET_WEB_URL,
        user_agent: str = USER_AGENT,
        transport: AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the page client.

        Args:
            base_url: Polymarket web origin
            user_agent: Value sent in the User-Agent header of every request
            transport: Optional httpx transport (tests pass an httpx.MockTransport)
        """
        self.base_url = base_url
        self.client = AsyncClient(
            headers={"User-Agent": user_agent},
            timeout=REQUEST_TIMEOUT,
            follow_redirects=True,
            transport=transport,
        )

    @beartype
    async def get_page(self, url: str) -> str:
        """
        Fetch a page and return its body text.

        Args:
            url: Absolute page URL

        Returns:
            Response body decoded as text

        Raises:
            HTTPStatusError: If the response status is not 2xx
            TransportError: If the connection fails
        """
        response = await self.client.get(url)
        response.raise_for_status()
        return response.text

    @beartype
    async def get_event_page(self, event_slug: str) -> str:
        """
        Fetch the HTML of a Polymarket event page.

        Args:
            event_slug: Polymarket event slug (e.g., "bitcoin-above-on-january-14")

        Returns:
            Event page HTML

        Raises:
            ValueError: If the slug is not a valid path segment
            HTTPStatusError: If the response status is not 2xx
            TransportError: If the connection fails
        """
        return await self.get_page(build_event_url(event_slug, self.base_url))

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> AsyncPolymarketPageClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
