"""Ladder rung matching rules."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from beartype import beartype

from ladder_scanner.utils.config import LADDER_DATE_SLUG, LADDER_DATE_TEXT, LADDER_SLUG_PREFIX

MarketMatcher = Callable[[Mapping[str, object]], bool]


def _lowered(market: Mapping[str, object], key: str) -> str:
    value = market.get(key)
    return str(value).lower() if value is not None else ""


@beartype
def make_ladder_matcher(
    slug_prefix: str = LADDER_SLUG_PREFIX,
    date_slug: str = LADDER_DATE_SLUG,
    date_text: str = LADDER_DATE_TEXT,
) -> MarketMatcher:
    """
    Build a case-insensitive predicate selecting the rungs of one ladder.

    A market matches when its slug contains ``slug_prefix`` and either its slug
    contains ``date_slug`` or its question contains ``date_text``.

    Args:
        slug_prefix: Text every rung slug contains (e.g., "bitcoin-above")
        date_slug: Date as it appears in slugs (e.g., "january-14")
        date_text: Date as it appears in questions (e.g., "january 14")

    Returns:
        Predicate over raw market mappings
    """
    prefix = slug_prefix.lower()
    day_slug = date_slug.lower()
    day_text = date_text.lower()

    def matches(market: Mapping[str, object]) -> bool:
        slug = _lowered(market, "slug")
        question = _lowered(market, "question")
        return prefix in slug and (day_slug in slug or day_text in question)

    return matches


_jan14_bitcoin_rung = make_ladder_matcher()


@beartype
def is_jan14_bitcoin_rung(market: Mapping[str, object]) -> bool:
    """Return True if the market is a rung of the Bitcoin January 14 ladder."""
    return _jan14_bitcoin_rung(market)
