"""Five-card hand parsing and classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from deck import HAND_SIZE, Card
from game_types import HandCategory, Suit


FACE_RANKS = {"J": 11, "Q": 12, "K": 13, "A": 14}
RANK_NAMES = {
    2: "Deuce",
    3: "Three",
    4: "Four",
    5: "Five",
    6: "Six",
    7: "Seven",
    8: "Eight",
    9: "Nine",
    10: "Ten",
    11: "Jack",
    12: "Queen",
    13: "King",
    14: "Ace",
}


class HandError(ValueError):
    """Base class for card strings that cannot be read as a hand."""

    message = "Invalid hand"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return f"Error: {self.args[0]}"


class EmptyHandError(HandError):
    message = "No cards!"


class WrongCountError(HandError):
    message = "Follow the example or click deal!"


class InvalidRankError(HandError):
    message = "Invalid rank...these aren't the cards you're looking for."


class InvalidSuitError(HandError):
    message = "Invalid suit...what is this, UNO?"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of reading a card string: sorted cards, or the error that stopped it."""

    cards: Tuple[Card, ...] = ()
    error: Optional[HandError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_rank(text: str) -> int:
    if text.isascii() and text.isdecimal():
        rank = int(text)
    else:
        rank = FACE_RANKS.get(text.upper(), 0)
    if not 1 < rank < 15:
        raise InvalidRankError()
    return rank


def parse_suit(text: str) -> Suit:
    try:
        return Suit(text.upper())
    except ValueError:
        raise InvalidSuitError() from None


def parse_card(token: str) -> Card:
    """Parse a single ``<rank><suit>`` token; the rank is checked first."""

    rank = parse_rank(token[:-1])
    suit = parse_suit(token[-1:])
    return Card(rank, suit)


def parse_hand(text: str) -> ParseResult:
    """Read a space-delimited five-card string into cards sorted by rank."""

    try:
        if text == "":
            raise EmptyHandError()
        tokens = text.split(" ")
        if len(tokens) != HAND_SIZE:
            raise WrongCountError()
        cards = [parse_card(token) for token in tokens]
    except HandError as exc:
        return ParseResult(error=exc)
    return ParseResult(cards=tuple(sorted(cards, key=lambda card: card.rank)))


def rank_name(rank: int, plural: bool = False) -> str:
    name = RANK_NAMES[rank]
    return f"{name}s" if plural else name


def _track_sets(cards: Sequence[Card]) -> Tuple[List[int], List[int], List[int]]:
    counts: Dict[int, int] = {}
    pairs: List[int] = []
    triplets: List[int] = []
    quads: List[int] = []
    for card in cards:
        count = counts.get(card.rank, 0) + 1
        counts[card.rank] = count
        if count == 2:
            pairs.append(card.rank)
        elif count == 3:
            pairs.remove(card.rank)
            triplets.append(card.rank)
        elif count == 4:
            triplets.remove(card.rank)
            quads.append(card.rank)
    # Five cards hold at most one quad, one triplet, or two pairs.
    assert len(quads) <= 1 and len(triplets) <= 1 and len(pairs) <= 2
    return pairs, triplets, quads


class Hand:
    """A scored five-card hand built from a card string.

    Construction never raises. Invalid input leaves only ``error`` set;
    check :meth:`get_error` before reading the score.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.cards: Tuple[Card, ...] = ()
        self.error: Optional[HandError] = None
        self.is_straight = False
        self.is_flush = False
        self.pairs: Tuple[int, ...] = ()
        self.triplets: Tuple[int, ...] = ()
        self.quads: Tuple[int, ...] = ()
        self.category: Optional[HandCategory] = None
        self.score: Optional[str] = None

        parsed = parse_hand(text)
        if not parsed.ok:
            self.error = parsed.error
            return
        self.cards = parsed.cards
        self._evaluate()
        self.category, self.score = self._score()

    def _evaluate(self) -> None:
        cards = self.cards
        base_suit = cards[0].suit
        self.is_flush = all(card.suit == base_suit for card in cards)
        self.is_straight = all(
            card.rank == previous.rank + 1 for previous, card in zip(cards, cards[1:])
        )
        pairs, triplets, quads = _track_sets(cards)
        self.pairs = tuple(sorted(pairs, reverse=True))
        self.triplets = tuple(triplets)
        self.quads = tuple(quads)

    def _score(self) -> Tuple[HandCategory, str]:
        low, high = self.cards[0].rank, self.cards[-1].rank
        suit = self.cards[0].suit.label

        if self.is_flush and self.is_straight:
            if low == 10:
                return HandCategory.ROYAL_FLUSH, f"Royal Flush, {suit}"
            return (
                HandCategory.STRAIGHT_FLUSH,
                f"Straight Flush, {rank_name(low)} to {rank_name(high)}, {suit}",
            )

        if self.quads:
            return (
                HandCategory.FOUR_OF_A_KIND,
                f"Four of a Kind, {rank_name(self.quads[0], True)}",
            )

        if self.triplets and self.pairs:
            triplet = rank_name(self.triplets[0], True)
            pair = rank_name(self.pairs[0], True)
            return HandCategory.FULL_HOUSE, f"Full House, {triplet} over {pair}"

        if self.is_flush:
            return HandCategory.FLUSH, f"Flush, {suit}"

        if self.is_straight:
            return HandCategory.STRAIGHT, f"Straight, {rank_name(low)} to {rank_name(high)}"

        if self.triplets:
            return (
                HandCategory.THREE_OF_A_KIND,
                f"Three of a Kind, {rank_name(self.triplets[0], True)}",
            )

        if len(self.pairs) > 1:
            higher, lower = self.pairs
            return (
                HandCategory.TWO_PAIR,
                f"Two Pair, {rank_name(higher, True)} and {rank_name(lower, True)}",
            )

        if self.pairs:
            return HandCategory.PAIR, f"Pair of {rank_name(self.pairs[0], True)}"

        return HandCategory.HIGH_CARD, f"High Card, {rank_name(high)}"

    def get_score(self) -> Optional[str]:
        return self.score

    def get_error(self) -> Union[bool, str]:
        """Return ``False`` for a valid hand, otherwise the error message."""

        if self.error is None:
            return False
        return str(self.error)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input": self.text,
            "cards": [str(card) for card in self.cards],
            "score": self.score,
            "category": self.category.value if self.category else None,
            "error": self.get_error() or None,
        }


def describe_hand(text: str) -> str:
    hand = Hand(text)
    error = hand.get_error()
    if error:
        return f"{text} ({error})"
    cards = " ".join(str(card) for card in hand.cards)
    return f"{cards} ({hand.get_score()})"


__all__ = [
    "EmptyHandError",
    "Hand",
    "HandError",
    "InvalidRankError",
    "InvalidSuitError",
    "ParseResult",
    "RANK_NAMES",
    "WrongCountError",
    "describe_hand",
    "parse_card",
    "parse_hand",
    "rank_name",
]
