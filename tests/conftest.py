"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable

import pytest

JAN14_RUNG = {
    "id": "m1",
    "question": "Will BTC be above $110k on January 14?",
    "slug": "bitcoin-above-110k-on-january-14",
    "clobTokenIds": ["Y1", "N1"],
}

ETHEREUM_MARKET = {
    "id": "m2",
    "question": "...",
    "slug": "ethereum-above-5k",
    "clobTokenIds": ["Y2", "N2"],
}


def _payload(queries: list[object]) -> dict[str, object]:
    return {"props": {"pageProps": {"dehydratedState": {"queries": queries}}}}


@pytest.fixture
def make_payload() -> Callable[[list[object]], dict[str, object]]:
    """Build a __NEXT_DATA__ payload around a list of dehydrated queries."""
    return _payload


@pytest.fixture
def make_page() -> Callable[[object], str]:
    """Render a payload into an event page the way Next.js embeds it."""

    def render(payload: object) -> str:
        return (
            "<!DOCTYPE html><html><head><title>Bitcoin above ___ on January 14?</title></head>"
            "<body><div id=\"__next\"></div>"
            f"<script id=\"__NEXT_DATA__\" type=\"application/json\">{json.dumps(payload)}</script>"
            "<script src=\"/_next/static/chunks/main.js\"></script>"
            "</body></html>"
        )

    return render


@pytest.fixture
def ladder_payload() -> dict[str, object]:
    """Payload with one event query holding a Bitcoin rung and an unrelated market."""
    return _payload([{"queryKey": ["/api/event/slug"], "state": {"data": {"markets": [JAN14_RUNG, ETHEREUM_MARKET]}}}])
