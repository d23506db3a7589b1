"""Command-line interface for dealing and scoring five-card hands."""

from __future__ import annotations

import argparse
import importlib.util
import json
import logging
from typing import Any, Dict, List, Optional

from game_types import HandCategory, SessionConfig
from logger import HandLogger
from session import HandRecord, PokerSession


LOGGER = logging.getLogger("poker.runner")


def _load_config(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        if path.endswith((".yaml", ".yml")):
            spec = importlib.util.find_spec("yaml")
            if spec is None:
                raise RuntimeError("PyYAML is required to load YAML configurations")
            module = importlib.util.module_from_spec(spec)
            if spec.loader is None:  # pragma: no cover
                raise RuntimeError("Unable to import yaml module")
            spec.loader.exec_module(module)  # type: ignore[no-untyped-call]
            return module.safe_load(handle) or {}  # type: ignore[attr-defined]
        return json.load(handle)


class StatsCollector:
    def __init__(self) -> None:
        self.total_hands = 0
        self.invalid = 0
        self.categories: Dict[str, int] = {category.value: 0 for category in HandCategory}

    def update(self, record: HandRecord) -> None:
        self.total_hands += 1
        if not record.is_valid:
            self.invalid += 1
            return
        assert record.category is not None
        self.categories[record.category] += 1

    def summary(self) -> Dict[str, Any]:
        scored = max(self.total_hands - self.invalid, 1)
        return {
            "total_hands": self.total_hands,
            "invalid_hands": self.invalid,
            "categories": [
                {"category": name, "count": count, "rate": count / scored}
                for name, count in self.categories.items()
            ],
        }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deal and score five-card poker hands")
    parser.add_argument("--hands", type=int, default=1, help="Number of hands to deal")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed")
    parser.add_argument(
        "--score",
        action="append",
        default=None,
        metavar="CARDS",
        help='Score a hand such as "2c 10d Kh Ah 7s" instead of dealing (repeatable)',
    )
    parser.add_argument("--log", type=str, default=None, help="Path to write per-hand logs")
    parser.add_argument(
        "--log-format", choices=["jsonl", "csv"], default="jsonl", help="Log format"
    )
    parser.add_argument(
        "--log-level", type=str, default="WARNING", help="Diagnostic logging level"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional JSON or YAML configuration file",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> Dict[str, Any]:
    parser = build_parser()
    defaults = parser.parse_args([])
    args = parser.parse_args(argv)
    if args.config:
        try:
            config = _load_config(args.config)
        except (OSError, ValueError, RuntimeError) as exc:
            parser.error(f"Cannot load {args.config}: {exc}")
        for key, value in config.items():
            if hasattr(args, key) and getattr(args, key) == getattr(defaults, key):
                setattr(args, key, value)
    if args.hands < 0:
        parser.error("--hands must be non-negative")

    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    session = PokerSession.from_config(SessionConfig(seed=args.seed))
    logger: Optional[HandLogger] = None
    if args.log:
        logger = HandLogger(args.log, fmt=args.log_format)
    stats = StatsCollector()

    inputs = list(args.score) if args.score else [None] * args.hands
    LOGGER.info("Playing %d hand(s)", len(inputs))
    try:
        for cards in inputs:
            hand = session.deal_and_play() if cards is None else session.play(cards)
            record = session.history[-1]
            stats.update(record)
            if logger:
                logger.log(record)
            outcome = hand.get_error() or hand.get_score()
            print(f"#{record.hand_number:<3} {hand.text:<20} {outcome}")
    finally:
        if logger:
            logger.close()

    summary = stats.summary()
    print(json.dumps(summary, indent=2, ensure_ascii=False))
    return summary


if __name__ == "__main__":
    main()
