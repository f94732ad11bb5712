"""Process entry point: scan the Bitcoin January 14 ladder every few seconds."""

from __future__ import annotations

import asyncio
from functools import partial

from beartype import beartype

from ladder_scanner.parser.page_client import AsyncPolymarketPageClient
from ladder_scanner.scanner.pipeline import scan_ladder
from ladder_scanner.scanner.scheduler import LadderScanner
from ladder_scanner.utils.config import BITCOIN_LADDER_EVENT_SLUG, POLL_INTERVAL_SECONDS


@beartype
async def run(
    event_slug: str = BITCOIN_LADDER_EVENT_SLUG,
    interval: float | int = POLL_INTERVAL_SECONDS,
) -> None:
    """
    Scan an event page forever on a fixed interval.

    Args:
        event_slug: Polymarket event slug to scan
        interval: Seconds between scans
    """
    async with AsyncPolymarketPageClient() as page_client:
        scanner = LadderScanner(partial(scan_ladder, page_client, event_slug), interval)
        scanner.start()
        try:
            await scanner.wait()
        finally:
            await scanner.stop()


def main() -> None:
    """Run the scanner until interrupted."""
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        print("\nScanner stopped.")


if __name__ == "__main__":
    main()
