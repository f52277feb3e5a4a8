"""
User-facing text: one sentence per clue, plus the share line shown after a play.
Rendering only reads the stored clues; it never re-runs the solver.
"""
from __future__ import annotations

from .clues import Clue, clue_to_dict

# Per clue type: sentence template over the clue's payload fields
CLUE_TEMPLATES: dict[str, str] = {
    "startsWith": "Starts with {letter}",
    "endsWith": "Ends with {letter}",
    "vowelCount": "Has exactly {count} vowels",
    "consonantCount": "Has exactly {count} consonants",
    "noRepeatLetters": "Has no repeated letters",
    "hasDoubleLetter": "Has a double letter",
    "letterAtPos": "Letter {pos} is {letter}",
    "contains": "Contains the letter {letter}",
    "notContains": "Does NOT contain the letter {letter}",
    "containsExactly": "Contains {letter} exactly {count} {times}",
    "alphaAfter": "Alphabetically after {word}",
    "alphaBefore": "Alphabetically before {word}",
    "sharedLettersAtLeast": "Shares at least {n} letters with {word}",
    "notWord": "Is NOT {word}",
}

# Share bars by solve time: (upper bound in seconds, bars)
TIME_BARS = [
    (10, "🟩🟩🟩🟩🟩"),
    (20, "🟩🟩🟩🟩⬜"),
    (30, "🟩🟩🟩⬜⬜"),
    (45, "🟩🟩⬜⬜⬜"),
]
SLOW_BARS = "🟩⬜⬜⬜⬜"
FAILED_BARS = "🟥🟥🟥🟥🟥"


def clue_text(clue: Clue) -> str:
    fields = clue_to_dict(clue)
    template = CLUE_TEMPLATES.get(fields["type"], "Clue")
    if fields["type"] == "containsExactly":
        fields["times"] = "time" if fields["count"] == 1 else "times"
    return template.format(**fields)


def clue_texts(clues: list[Clue]) -> list[str]:
    return [clue_text(c) for c in clues]


def time_bars(solved: bool, seconds: int) -> str:
    if not solved:
        return FAILED_BARS
    for limit, bars in TIME_BARS:
        if seconds < limit:
            return bars
    return SLOW_BARS


def share_text(date: str, solved: bool, seconds: int) -> str:
    """e.g. 'dotWord 2025-01-31 ✅ 12s' followed by the time bars on a second line."""
    mark = "✅" if solved else "❌"
    return f"dotWord {date} {mark} {seconds}s\n{time_bars(solved, seconds)}"
