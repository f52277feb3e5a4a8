"""
Today's puzzle: load it from the store or generate and save it once per UTC date.
Run: python -m dotword.daily [--date YYYY-MM-DD] [--reveal]
"""
from __future__ import annotations

import argparse
import logging
from datetime import datetime, timezone
from typing import Sequence

from .generator import generate_puzzle
from .hints import clue_texts
from .models import PlayResult, Puzzle
from .store import DuckDBStore, PlayStore, PuzzleStore
from .words import load_words

SEED_PREFIX = "v1-"


def today_utc() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


def puzzle_seed(date: str) -> str:
    return f"{SEED_PREFIX}{date}"


def ensure_puzzle(store: PuzzleStore, words: Sequence[str], date: str | None = None) -> Puzzle:
    """Stored puzzle for the date if present; otherwise generate, save, and return it."""
    date = date or today_utc()
    puzzle = store.get_puzzle(date)
    if puzzle is not None:
        return puzzle
    logging.info("Generating puzzle for %s", date)
    puzzle = generate_puzzle(puzzle_seed(date), words)
    store.put_puzzle(date, puzzle)
    return puzzle


def record_play(
    store: PlayStore, date: str, *, solved: bool, time_ms: int, hints: int = 0
) -> PlayResult:
    """Write the play result for the date. A second write replaces the first."""
    play = PlayResult(solved=1 if solved else 0, time_ms=max(0, int(time_ms)), hints=max(0, int(hints)))
    store.put_play(date, play)
    return play


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="dotWord: print the daily puzzle")
    ap.add_argument("--date", default=None, help="UTC date YYYY-MM-DD (default: today)")
    ap.add_argument("--reveal", action="store_true", help="also print the answer")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    date = args.date or today_utc()
    store = DuckDBStore()
    try:
        puzzle = ensure_puzzle(store, load_words(), date)
    finally:
        store.close()

    print(f"dotWord {date}")
    print("Clues:")
    for text in clue_texts(puzzle.clues):
        print(f"  - {text}")
    print()
    print("Words:")
    for w in puzzle.picks:
        print(f"  {w}")
    if args.reveal:
        print()
        print(f"Answer: {puzzle.answer}")


if __name__ == "__main__":
    main()
