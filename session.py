"""Single-player session tying a dealer to the hands it produces."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from deck import Dealer
from game_types import SessionConfig
from hand_eval import Hand


LOGGER = logging.getLogger("poker.session")


@dataclass
class HandRecord:
    hand_number: int
    cards: str
    score: Optional[str]
    category: Optional[str]
    error: Optional[str]

    @classmethod
    def from_hand(cls, hand_number: int, hand: Hand) -> "HandRecord":
        return cls(
            hand_number=hand_number,
            cards=hand.text,
            score=hand.get_score(),
            category=hand.category.value if hand.category else None,
            error=hand.get_error() or None,
        )

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hand_number": self.hand_number,
            "cards": self.cards,
            "score": self.score,
            "category": self.category,
            "error": self.error,
        }


@dataclass
class PokerSession:
    """One player's table: a dealer, the current hand, and what was played."""

    dealer: Dealer
    hand: Optional[Hand] = None
    history: List[HandRecord] = field(default_factory=list)
    history_limit: int = 100
    hands_played: int = 0

    @classmethod
    def from_config(cls, config: SessionConfig) -> "PokerSession":
        rng = random.Random(config.seed) if config.seed is not None else random.Random()
        return cls(dealer=Dealer(rng=rng), history_limit=config.history_limit)

    def deal(self) -> str:
        return self.dealer.deal()

    def play(self, cards: str) -> Hand:
        """Score ``cards`` and make the result the current hand."""

        hand = Hand(cards)
        self.hand = hand
        self.hands_played += 1
        record = HandRecord.from_hand(self.hands_played, hand)
        self.history.append(record)
        if len(self.history) > self.history_limit:
            del self.history[: len(self.history) - self.history_limit]
        if record.is_valid:
            LOGGER.debug("Hand %d: %s -> %s", record.hand_number, cards, record.score)
        else:
            LOGGER.debug("Hand %d rejected: %s", record.hand_number, record.error)
        return hand

    def deal_and_play(self) -> Hand:
        return self.play(self.deal())

    def reset(self) -> None:
        """Clear the current hand; the deck keeps its position."""

        self.hand = None


__all__ = ["HandRecord", "PokerSession"]
