"""Extraction of the embedded Next.js data blob from Polymarket pages."""

from __future__ import annotations

import json
import re

from beartype import beartype

NEXT_DATA_PATTERN = re.compile(r'<script id="__NEXT_DATA__"[^>]*>([\s\S]*?)</script>')


class NextDataNotFoundError(ValueError):
    """Raised when a page has no __NEXT_DATA__ script element."""


@beartype
def extract_next_data(html: str) -> object:
    """
    Extract and parse the __NEXT_DATA__ JSON payload from page HTML.

    Args:
        html: Page HTML text

    Returns:
        Parsed JSON value, not validated against any schema

    Raises:
        NextDataNotFoundError: If the script element is missing
        json.JSONDecodeError: If the script content is not valid JSON
    """
    match = NEXT_DATA_PATTERN.search(html)
    if not match:
        raise NextDataNotFoundError("__NEXT_DATA__ not found")

    return json.loads(match.group(1))
