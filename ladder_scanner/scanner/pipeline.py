"""One scan of the Bitcoin ladder: fetch, extract, locate, report."""

from __future__ import annotations

from typing import TextIO

from ladder_scanner.extractors.classifier import MarketMatcher, is_jan14_bitcoin_rung
from ladder_scanner.extractors.market_locator import locate_markets
from ladder_scanner.extractors.models import LadderMarket
from ladder_scanner.extractors.next_data import extract_next_data
from ladder_scanner.parser.page_client import AsyncPolymarketPageClient
from ladder_scanner.scanner.reporter import report_markets, report_scan_started
from ladder_scanner.utils.config import BITCOIN_LADDER_EVENT_SLUG
from ladder_scanner.utils.logger import get_logger

logger = get_logger(__name__)


async def scan_ladder(
    page_client: AsyncPolymarketPageClient,
    event_slug: str = BITCOIN_LADDER_EVENT_SLUG,
    matcher: MarketMatcher = is_jan14_bitcoin_rung,
    stream: TextIO | None = None,
) -> list[LadderMarket]:
    """
    Run a single scan of a ladder event page and print the matching rungs.

    Args:
        page_client: Client used to fetch the event page
        event_slug: Polymarket event slug to scan
        matcher: Predicate selecting ladder rungs among the page's markets
        stream: Output stream for the report (stdout if None)

    Returns:
        Markets that were reported

    Raises:
        HTTPStatusError: If the event page returns a non-2xx status
        TransportError: If the connection fails
        NextDataNotFoundError: If the page has no __NEXT_DATA__ element
        json.JSONDecodeError: If the embedded payload is not valid JSON
    """
    report_scan_started(stream)

    html = await page_client.get_event_page(event_slug)
    logger.debug(f"Fetched {len(html)} characters for event {event_slug}")

    payload = extract_next_data(html)
    markets = locate_markets(payload, matcher)
    logger.debug(f"Located {len(markets)} ladder markets for event {event_slug}")

    report_markets(markets, stream)
    return markets
