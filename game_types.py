"""Shared enums and dataclasses describing suits, hand categories, and sessions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Suit(str, Enum):
    """The four suits, keyed by their single-character code."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def letter(self) -> str:
        """Lowercase code used in dealt card strings."""

        return self.value.lower()


class HandCategory(str, Enum):
    """Descriptive categories a five-card hand can fall into."""

    ROYAL_FLUSH = "Royal Flush"
    STRAIGHT_FLUSH = "Straight Flush"
    FOUR_OF_A_KIND = "Four of a Kind"
    FULL_HOUSE = "Full House"
    FLUSH = "Flush"
    STRAIGHT = "Straight"
    THREE_OF_A_KIND = "Three of a Kind"
    TWO_PAIR = "Two Pair"
    PAIR = "Pair"
    HIGH_CARD = "High Card"


@dataclass(frozen=True)
class SessionConfig:
    """Settings used to build a playing session."""

    seed: Optional[int] = None
    history_limit: int = 100


__all__ = [
    "HandCategory",
    "SessionConfig",
    "Suit",
]
