"""Locate ladder markets inside the dehydrated query cache of a page payload."""

from __future__ import annotations

from collections.abc import Mapping

from beartype import beartype

from ladder_scanner.extractors.classifier import MarketMatcher, is_jan14_bitcoin_rung
from ladder_scanner.extractors.models import LadderMarket


def _child(node: object, key: str) -> object:
    """Return node[key] if node is a mapping, otherwise None."""
    if isinstance(node, Mapping):
        return node.get(key)
    return None


@beartype
def find_queries(payload: object) -> list[object]:
    """
    Return the dehydrated React Query entries of a __NEXT_DATA__ payload.

    Follows props.pageProps.dehydratedState.queries; any missing step gives [].
    """
    node = payload
    for key in ("props", "pageProps", "dehydratedState", "queries"):
        node = _child(node, key)

    if not isinstance(node, list):
        return []
    return node


@beartype
def locate_markets(
    payload: object,
    matcher: MarketMatcher = is_jan14_bitcoin_rung,
) -> list[LadderMarket]:
    """
    Find the ladder markets in a parsed page payload.

    Only the first query whose state.data carries a markets list is consulted;
    lists from later queries are never merged in.

    Args:
        payload: Parsed __NEXT_DATA__ value
        matcher: Predicate deciding which raw markets belong to the ladder

    Returns:
        Matching markets in page order, [] if no query has a markets list
    """
    for query in find_queries(payload):
        data = _child(_child(query, "state"), "data")
        markets_data = _child(data, "markets")
        if not isinstance(markets_data, list):
            continue

        return [
            LadderMarket.from_dict(market_item)
            for market_item in markets_data
            if isinstance(market_item, Mapping) and matcher(market_item)
        ]

    return []
