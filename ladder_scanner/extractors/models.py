"""Data models for ladder market extraction."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field


def _text(value: object) -> str:
    """Render an optional payload field as text, absent or null becomes empty."""
    if value is None:
        return ""
    return str(value)


def _token_ids(raw: object) -> tuple[str, ...]:
    # Polymarket ships clobTokenIds either as a list or as a JSON-encoded list
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return ()
    if not isinstance(raw, list):
        return ()
    return tuple(_text(token) for token in raw)


@dataclass
class LadderMarket:
    """Represents one rung of a Polymarket ladder event."""

    id: str
    question: str
    slug: str
    clob_token_ids: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> LadderMarket:
        """
        Build a market from a raw market record of the page payload.

        Args:
            data: Market mapping (keys id, question, slug, clobTokenIds are all optional)

        Returns:
            LadderMarket with absent text fields set to ""
        """
        return cls(
            id=_text(data.get("id")),
            question=_text(data.get("question")),
            slug=_text(data.get("slug")),
            clob_token_ids=_token_ids(data.get("clobTokenIds")),
        )

    @property
    def yes_token(self) -> str:
        """YES outcome token, first position of clobTokenIds."""
        return self.clob_token_ids[0] if len(self.clob_token_ids) > 0 else ""

    @property
    def no_token(self) -> str:
        """NO outcome token, second position of clobTokenIds."""
        return self.clob_token_ids[1] if len(self.clob_token_ids) > 1 else ""
