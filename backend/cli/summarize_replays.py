#!/usr/bin/env python3
"""Summarize exported GridSnake replay logs.

Scans a replay directory for snake_game_*.json (written by
`main.py --save-replay`) and extracts per-game metrics:
  - ticks played / max_ticks
  - final snake length and board area
  - fill ratio (final length / area)
  - outcome and crash reason
Prints outcome counts and the top N games by fill ratio and by ticks.
"""

import argparse
import json
import logging
import os
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _get_replay_dir() -> str:
    d = os.getenv("SNAKE_REPLAY_DIR", "completed_games").strip()
    return d or "completed_games"


@dataclass
class ReplayMetrics:
    game_id: str
    filename: str
    outcome: str
    death_reason: Optional[str]
    ticks: int
    max_ticks: int
    final_length: int
    area: int

    @property
    def fill_ratio(self) -> float:
        return self.final_length / self.area if self.area else 0.0


def extract_metrics(path: Path) -> Optional[ReplayMetrics]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load %s: %s", path.name, exc)
        return None

    meta = data.get("metadata", {}) or {}
    rounds = data.get("rounds", []) or []

    game_id = str(meta.get("game_id") or path.stem.replace("snake_game_", ""))
    width = int(meta.get("width") or 0)
    height = int(meta.get("height") or 0)

    ticks = int(meta.get("actual_ticks") or 0)
    if not ticks and rounds:
        # Fallback: the last recorded snapshot carries the tick counter
        ticks = int(rounds[-1].get("tick") or 0)

    final_length = int(meta.get("final_length") or 0)
    if not final_length and rounds:
        final_length = len(rounds[-1].get("body") or [])

    return ReplayMetrics(
        game_id=game_id,
        filename=path.name,
        outcome=str(meta.get("outcome") or "unknown"),
        death_reason=meta.get("death_reason"),
        ticks=ticks,
        max_ticks=int(meta.get("max_ticks") or ticks),
        final_length=final_length,
        area=width * height,
    )


def load_replays(root: Path) -> List[ReplayMetrics]:
    games: List[ReplayMetrics] = []
    for p in sorted(root.glob("snake_game_*.json")):
        m = extract_metrics(p)
        if m is not None:
            games.append(m)
    return games


def outcome_counts(games: Iterable[ReplayMetrics]) -> Counter:
    counts: Counter = Counter()
    for g in games:
        key = g.outcome if g.death_reason is None else f"{g.outcome}:{g.death_reason}"
        counts[key] += 1
    return counts


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Summarize exported GridSnake replay logs",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=_get_replay_dir(),
        help="Directory containing snake_game_*.json (default: SNAKE_REPLAY_DIR or completed_games)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=10,
        help="How many top games to show per metric (default: 10)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
    )

    root = Path(args.root).resolve()
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Root directory does not exist or is not a directory: {root}")

    games = load_replays(root)
    if not games:
        logger.info("No valid snake_game_*.json files found under %s", root)
        return

    logger.info("Summarizing %d replays under %s", len(games), root)
    for outcome, count in sorted(outcome_counts(games).items()):
        logger.info("  %-16s %d", outcome, count)

    top_n = max(1, args.top)

    def show(title: str, items: List[ReplayMetrics], key_desc: str):
        logger.info("")
        logger.info("=== %s (top %d by %s) ===", title, top_n, key_desc)
        for g in items[:top_n]:
            logger.info(
                "%s  file=%s  outcome=%s  ticks=%d/%d  length=%d/%d  fill=%.1f%%",
                g.game_id,
                g.filename,
                g.outcome,
                g.ticks,
                g.max_ticks,
                g.final_length,
                g.area,
                g.fill_ratio * 100,
            )

    show("Best board coverage", sorted(games, key=lambda g: g.fill_ratio, reverse=True), "fill_ratio")
    show("Longest games", sorted(games, key=lambda g: g.ticks, reverse=True), "ticks")


if __name__ == "__main__":
    main()
