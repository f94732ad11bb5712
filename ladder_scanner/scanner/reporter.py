"""Console output for scan results."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from datetime import datetime
from typing import TextIO

from ladder_scanner.extractors.models import LadderMarket

NOT_FOUND_MESSAGE = "❌ No January 14 Bitcoin ladder markets found."


def format_market(market: LadderMarket) -> str:
    """Format one ladder rung as a multi-line console block."""
    return (
        f"🪜 {market.question}\n"
        f"   Slug: {market.slug}\n"
        f"   Market ID: {market.id}\n"
        f"   YES Token: {market.yes_token}\n"
        f"   NO  Token: {market.no_token}\n"
    )


def report_scan_started(stream: TextIO | None = None, now: datetime | None = None) -> None:
    """Print the timestamped banner that opens every scan."""
    out = stream if stream is not None else sys.stdout
    timestamp = (now or datetime.now()).strftime("%H:%M:%S")
    print(f"[{timestamp}] Scanning Bitcoin January 14 ladder markets…", file=out)


def report_markets(markets: Sequence[LadderMarket], stream: TextIO | None = None) -> None:
    """
    Print the ladder rungs found by a scan.

    Args:
        markets: Matching markets, possibly empty
        stream: Output stream (defaults to stdout at call time)
    """
    out = stream if stream is not None else sys.stdout

    if not markets:
        print(NOT_FOUND_MESSAGE, file=out)
        return

    print(f"\n✅ Found {len(markets)} Bitcoin ladder rungs:\n", file=out)
    for market in markets:
        print(format_market(market), file=out)
