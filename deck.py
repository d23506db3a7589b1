"""Utilities for working with a standard 52-card deck."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from game_types import Suit


LOGGER = logging.getLogger("poker.deck")

RANKS: Sequence[int] = tuple(range(2, 15))
SUITS: Sequence[Suit] = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
FACE_LETTERS = {11: "J", 12: "Q", 13: "K", 14: "A"}
HAND_SIZE = 5


@dataclass(frozen=True)
class Card:
    """Representation of a single playing card."""

    rank: int
    suit: Suit

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Unknown rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Unknown suit: {self.suit}")

    def __str__(self) -> str:
        return format_card(self)


def format_card(card: Card) -> str:
    """Encode a card as ``<rank><suit>``, e.g. ``10c`` or ``Kh``."""

    rank = FACE_LETTERS.get(card.rank, str(card.rank))
    return f"{rank}{card.suit.letter}"


def build_deck() -> List[str]:
    """Return the 52 card encodings in a fixed order: suit by suit, low to high."""

    return [format_card(Card(rank, suit)) for suit in SUITS for rank in RANKS]


class Dealer:
    """Deals sequential five-card hands from one shuffled deck.

    The dealer walks a cursor through its shuffled deck, so no card repeats
    until the deck runs out. When fewer than five cards remain it reshuffles
    the full deck and starts again from the top.
    """

    def __init__(self, *, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self.deck: List[str] = build_deck()
        self.cursor = 0
        self.shuffle()

    def shuffle(self) -> None:
        """Fisher-Yates shuffle of the whole deck, in place; rewinds the cursor."""

        deck = self.deck
        for i in range(len(deck) - 1, 0, -1):
            j = self._rng.randint(0, i)
            deck[i], deck[j] = deck[j], deck[i]
        self.cursor = 0
        LOGGER.debug("Deck reshuffled")

    def remaining(self) -> int:
        """Return the number of cards left before the next reshuffle."""

        return len(self.deck) - self.cursor

    def deal(self) -> str:
        """Deal the next five cards as a space-delimited string."""

        if self.cursor > len(self.deck) - HAND_SIZE:
            self.shuffle()
        cards = self.deck[self.cursor : self.cursor + HAND_SIZE]
        self.cursor += HAND_SIZE
        return " ".join(cards)


__all__ = [
    "Card",
    "Dealer",
    "FACE_LETTERS",
    "HAND_SIZE",
    "RANKS",
    "SUITS",
    "build_deck",
    "format_card",
]
