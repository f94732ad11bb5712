"""URL building utilities for Polymarket event pages."""

from __future__ import annotations

from beartype import beartype

from ladder_scanner.utils.config import POLYMARKET_WEB_URL


@beartype
def build_event_url(event_slug: str, base_url: str = POLYMARKET_WEB_URL) -> str:
    """
    Build the public event page URL for an event slug.

    Args:
        event_slug: Polymarket event slug (e.g., "bitcoin-above-on-january-14")
        base_url: Polymarket web origin

    Returns:
        Event page URL (e.g., https://polymarket.com/event/bitcoin-above-on-january-14)

    Raises:
        ValueError: If the slug is empty or contains path separators
    """
    slug = event_slug.strip().strip("/")
    if not slug:
        raise ValueError("Event slug must be a non-empty string")

    if "/" in slug or "?" in slug or "#" in slug:
        raise ValueError(f"Event slug must be a single path segment: {event_slug}")

    return f"{base_url.rstrip('/')}/event/{slug}"
