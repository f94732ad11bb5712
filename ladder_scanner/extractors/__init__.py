"""Ladder market extraction from Polymarket event pages."""

from __future__ import annotations

from ladder_scanner.extractors.classifier import MarketMatcher, is_jan14_bitcoin_rung, make_ladder_matcher
from ladder_scanner.extractors.market_locator import find_queries, locate_markets
from ladder_scanner.extractors.models import LadderMarket
from ladder_scanner.extractors.next_data import NextDataNotFoundError, extract_next_data
from ladder_scanner.extractors.url_builder import build_event_url

__all__ = [
    "LadderMarket",
    "MarketMatcher",
    "NextDataNotFoundError",
    "build_event_url",
    "extract_next_data",
    "find_queries",
    "is_jan14_bitcoin_rung",
    "locate_markets",
    "make_ladder_matcher",
]
