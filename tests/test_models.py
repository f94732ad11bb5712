"""Tests for ladder market models."""

from __future__ import annotations

from ladder_scanner.extractors.models import LadderMarket


def test_from_dict_full_record() -> None:
    """Test building a market from a complete record."""
    market = LadderMarket.from_dict(
        {
            "id": "m1",
            "question": "Will BTC be above $110k on January 14?",
            "slug": "bitcoin-above-110k-on-january-14",
            "clobTokenIds": ["Y1", "N1"],
            "outcomes": ["Yes", "No"],
        }
    )

    assert market == LadderMarket(
        id="m1",
        question="Will BTC be above $110k on January 14?",
        slug="bitcoin-above-110k-on-january-14",
        clob_token_ids=("Y1", "N1"),
    )
    assert market.yes_token == "Y1"
    assert market.no_token == "N1"


def test_from_dict_missing_fields() -> None:
    """Test absent fields become empty text and no tokens."""
    market = LadderMarket.from_dict({})

    assert market == LadderMarket(id="", question="", slug="", clob_token_ids=())
    assert market.yes_token == ""
    assert market.no_token == ""


def test_from_dict_numeric_id() -> None:
    """Test numeric identifiers are rendered as text."""
    assert LadderMarket.from_dict({"id": 516710}).id == "516710"


def test_from_dict_json_encoded_token_ids() -> None:
    """Test clobTokenIds shipped as a JSON-encoded string are decoded."""
    market = LadderMarket.from_dict({"clobTokenIds": '["111", "222"]'})
    assert market.clob_token_ids == ("111", "222")


def test_from_dict_malformed_token_ids() -> None:
    """Test unusable clobTokenIds values give no tokens."""
    assert LadderMarket.from_dict({"clobTokenIds": "not json"}).clob_token_ids == ()
    assert LadderMarket.from_dict({"clobTokenIds": {"yes": "1"}}).clob_token_ids == ()
    assert LadderMarket.from_dict({"clobTokenIds": None}).clob_token_ids == ()


def test_single_token_leaves_no_token_blank() -> None:
    """Test a one-element token list only fills the YES position."""
    market = LadderMarket.from_dict({"clobTokenIds": ["Y1"]})
    assert market.yes_token == "Y1"
    assert market.no_token == ""
