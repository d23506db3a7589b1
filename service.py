"""Flask service exposing a REST API for the five-card hand scorer demo."""

from __future__ import annotations

import logging
import os
import uuid
from typing import Any, Dict, Optional

from flask import Flask, abort, jsonify, request
from werkzeug.exceptions import HTTPException

from game_types import SessionConfig
from hand_eval import Hand
from session import PokerSession


LOGGER = logging.getLogger("poker.service")

SESSIONS: Dict[str, PokerSession] = {}
app = Flask(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_config(payload: Dict[str, Any]) -> SessionConfig:
    seed = payload.get("seed")
    return SessionConfig(
        seed=int(seed) if seed is not None else None,
        history_limit=int(payload.get("history_limit", SessionConfig.history_limit)),
    )


def _serialize_hand(hand: Optional[Hand]) -> Optional[Dict[str, Any]]:
    if hand is None:
        return None
    return hand.to_dict()


def _serialize_session(session_id: str, session: PokerSession) -> Dict[str, Any]:
    return {
        "session_id": session_id,
        "hand": _serialize_hand(session.hand),
        "hands_played": session.hands_played,
        "history": len(session.history),
        "cards_remaining": session.dealer.remaining(),
    }


def _get_session(session_id: str) -> PokerSession:
    session = SESSIONS.get(session_id)
    if session is None:
        abort(404, description="Session not found")
    return session


def _cards_from_request() -> str:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict) or "cards" not in payload:
        abort(400, description="Missing cards")
    cards = payload["cards"]
    if not isinstance(cards, str):
        abort(400, description="cards must be a string")
    return cards


def _hand_response(session_id: Optional[str], hand: Hand):
    body = {"session_id": session_id, "hand": hand.to_dict()}
    status = 400 if hand.get_error() else 200
    return jsonify(body), status


@app.errorhandler(HTTPException)
def _json_error(exc: HTTPException):
    return jsonify({"error": exc.description}), exc.code


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.post("/api/sessions")
def create_session():
    payload = request.get_json(force=True, silent=True) or {}
    if not isinstance(payload, dict):
        abort(400, description="Request body must be a JSON object")
    try:
        config = _make_config(payload)
    except (TypeError, ValueError) as exc:
        abort(400, description=str(exc))
    session_id = str(uuid.uuid4())
    SESSIONS[session_id] = PokerSession.from_config(config)
    LOGGER.info("Created session %s", session_id)
    return jsonify(_serialize_session(session_id, SESSIONS[session_id])), 201


@app.get("/api/sessions/<session_id>")
def get_session(session_id: str):
    session = _get_session(session_id)
    return jsonify(_serialize_session(session_id, session))


@app.post("/api/sessions/<session_id>/deal")
def deal_hand(session_id: str):
    session = _get_session(session_id)
    hand = session.deal_and_play()
    return _hand_response(session_id, hand)


@app.post("/api/sessions/<session_id>/hand")
def play_hand(session_id: str):
    session = _get_session(session_id)
    hand = session.play(_cards_from_request())
    return _hand_response(session_id, hand)


@app.post("/api/sessions/<session_id>/reset")
def reset_session(session_id: str):
    session = _get_session(session_id)
    session.reset()
    return jsonify(_serialize_session(session_id, session))


@app.post("/api/hands")
def score_hand():
    return _hand_response(None, Hand(_cards_from_request()))


if __name__ == "__main__":  # pragma: no cover
    logging.basicConfig(level=logging.INFO)
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 8000)))
