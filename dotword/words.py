"""
Load the word list puzzles are drawn from.
Uses env WORD_LIST if set, else the list bundled with the package.
File order is kept: the fallback puzzle uses the first five words.
"""
from pathlib import Path
import os
import re

DEFAULT_WORD_LIST = Path(__file__).resolve().parent / "data" / "words.txt"
# Only A-Z; the generator upper-cases
ALPHA_ONLY = re.compile(r"^[a-zA-Z]+$")


def get_word_list_path() -> Path:
    p = os.environ.get("WORD_LIST")
    if p:
        return Path(p)
    return DEFAULT_WORD_LIST


def load_words(path: Path | str | None = None) -> list[str]:
    """Read one word per line; skip blanks, '#' comments, non-letters and repeats."""
    path = Path(path) if path is not None else get_word_list_path()
    if not path.exists():
        raise FileNotFoundError(f"Word list not found at {path}. Set WORD_LIST to a word file.")
    words: list[str] = []
    seen: set[str] = set()
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        for line in f:
            w = line.strip()
            if not w or w.startswith("#") or w in seen:
                continue
            if not ALPHA_ONLY.match(w):
                continue
            words.append(w)
            seen.add(w)
    return words
