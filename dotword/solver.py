"""
Clue evaluation and candidate filtering.

satisfies() answers "does this word match this clue?"; solve() keeps the words
that match every clue. Words are expected uppercase; comparisons are case-sensitive.
Out-of-range positions and absent letters evaluate to False, never raise.
"""
from __future__ import annotations

from typing import Iterable, Sequence

from .clues import (
    AlphaAfter,
    AlphaBefore,
    Clue,
    ConsonantCount,
    Contains,
    ContainsExactly,
    EndsWith,
    HasDoubleLetter,
    LetterAtPos,
    NoRepeatLetters,
    NotContains,
    NotWord,
    SharedLettersAtLeast,
    StartsWith,
    VowelCount,
)
from .letters import (
    consonant_count,
    count_letter,
    has_double_letter,
    shared_letters_count,
    vowel_count,
)


def satisfies(word: str, clue: Clue) -> bool:
    if isinstance(clue, StartsWith):
        return word.startswith(clue.letter)
    if isinstance(clue, EndsWith):
        return word.endswith(clue.letter)
    if isinstance(clue, VowelCount):
        return vowel_count(word) == clue.count
    if isinstance(clue, ConsonantCount):
        return consonant_count(word) == clue.count
    if isinstance(clue, NoRepeatLetters):
        return len(set(word)) == len(word)
    if isinstance(clue, HasDoubleLetter):
        return has_double_letter(word)
    if isinstance(clue, LetterAtPos):
        idx = clue.pos - 1
        if idx < 0 or idx >= len(word):
            return False
        return word[idx] == clue.letter
    if isinstance(clue, Contains):
        return clue.letter in word
    if isinstance(clue, NotContains):
        return clue.letter not in word
    if isinstance(clue, ContainsExactly):
        return count_letter(word, clue.letter) == clue.count
    if isinstance(clue, AlphaAfter):
        return word > clue.word
    if isinstance(clue, AlphaBefore):
        return word < clue.word
    if isinstance(clue, SharedLettersAtLeast):
        return shared_letters_count(word, clue.word) >= clue.n
    if isinstance(clue, NotWord):
        return word != clue.word
    raise TypeError(f"Not a clue: {clue!r}")


def solve(words: Iterable[str], clues: Sequence[Clue]) -> list[str]:
    """Words matching ALL clues, in input order. No clues -> every word."""
    return [w for w in words if all(satisfies(w, c) for c in clues)]
