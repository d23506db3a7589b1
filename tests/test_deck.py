from __future__ import annotations

import random

import pytest

from deck import Card, Dealer, build_deck, format_card
from game_types import Suit
from hand_eval import Hand


def test_build_deck_has_52_distinct_cards_in_fixed_order():
    deck = build_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[:13] == [
        "2c", "3c", "4c", "5c", "6c", "7c", "8c", "9c", "10c", "Jc", "Qc", "Kc", "Ac"
    ]
    assert deck[-1] == "As"


def test_format_card_uses_face_letters_and_lowercase_suits():
    assert format_card(Card(10, Suit.CLUBS)) == "10c"
    assert format_card(Card(13, Suit.HEARTS)) == "Kh"
    assert str(Card(14, Suit.DIAMONDS)) == "Ad"


def test_card_rejects_out_of_range_rank():
    with pytest.raises(ValueError, match="Unknown rank"):
        Card(1, Suit.CLUBS)
    with pytest.raises(ValueError, match="Unknown suit"):
        Card(5, "x")


def test_shuffle_is_a_permutation():
    dealer = Dealer(rng=random.Random(7))
    for _ in range(20):
        dealer.shuffle()
        assert dealer.cursor == 0
        assert len(dealer.deck) == 52
        assert sorted(dealer.deck) == sorted(build_deck())


def test_shuffle_depends_on_rng_seed():
    first = Dealer(rng=random.Random(1)).deck
    again = Dealer(rng=random.Random(1)).deck
    other = Dealer(rng=random.Random(2)).deck
    assert first == again
    assert first != other


def test_ten_deals_never_repeat_a_card():
    dealer = Dealer(rng=random.Random(42))
    seen = []
    for _ in range(10):
        hand = dealer.deal().split(" ")
        assert len(hand) == 5
        seen.extend(hand)
    assert len(seen) == 50
    assert len(set(seen)) == 50
    assert dealer.remaining() == 2


def test_eleventh_deal_reshuffles():
    dealer = Dealer(rng=random.Random(3))
    for _ in range(10):
        dealer.deal()
    assert dealer.cursor == 50

    cards = dealer.deal().split(" ")
    assert len(cards) == 5
    assert len(set(cards)) == 5
    assert dealer.cursor == 5
    assert sorted(dealer.deck) == sorted(build_deck())


def test_dealt_hands_are_always_valid():
    dealer = Dealer(rng=random.Random(11))
    for _ in range(40):
        hand = Hand(dealer.deal())
        assert hand.get_error() is False
        assert hand.get_score()
