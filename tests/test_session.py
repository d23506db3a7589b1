from __future__ import annotations

import random

from deck import Dealer
from game_types import SessionConfig
from session import HandRecord, PokerSession


def test_seeded_sessions_deal_the_same_hands():
    first = PokerSession.from_config(SessionConfig(seed=99))
    second = PokerSession.from_config(SessionConfig(seed=99))
    assert [first.deal() for _ in range(12)] == [second.deal() for _ in range(12)]


def test_play_records_current_hand_and_history():
    session = PokerSession(dealer=Dealer(rng=random.Random(5)))
    hand = session.play("2c 2d 3h 3s 3c")

    assert session.hand is hand
    assert session.hands_played == 1
    assert session.history == [
        HandRecord(
            hand_number=1,
            cards="2c 2d 3h 3s 3c",
            score="Full House, Threes over Deuces",
            category="Full House",
            error=None,
        )
    ]


def test_invalid_hand_is_recorded_with_its_error():
    session = PokerSession(dealer=Dealer(rng=random.Random(5)))
    hand = session.play("1c 2d 3h 4s 5c")

    assert hand.get_error()
    record = session.history[-1]
    assert not record.is_valid
    assert record.score is None
    assert record.category is None
    assert record.error == hand.get_error()


def test_deal_and_play_uses_the_dealer():
    session = PokerSession.from_config(SessionConfig(seed=1))
    hand = session.deal_and_play()
    assert hand.get_error() is False
    assert session.dealer.cursor == 5
    assert session.history[-1].cards == hand.text


def test_reset_clears_hand_but_keeps_deck_position():
    session = PokerSession.from_config(SessionConfig(seed=1))
    session.deal_and_play()
    session.reset()
    assert session.hand is None
    assert session.dealer.cursor == 5
    assert session.hands_played == 1


def test_history_is_capped():
    session = PokerSession.from_config(SessionConfig(seed=4, history_limit=3))
    for _ in range(5):
        session.deal_and_play()
    assert [record.hand_number for record in session.history] == [3, 4, 5]


def test_record_to_dict():
    session = PokerSession.from_config(SessionConfig(seed=4))
    session.play("Ah Ad 7c 5d 3s")
    assert session.history[0].to_dict() == {
        "hand_number": 1,
        "cards": "Ah Ad 7c 5d 3s",
        "score": "Pair of Aces",
        "category": "Pair",
        "error": None,
    }
