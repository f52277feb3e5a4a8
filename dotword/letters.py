"""
Letter statistics for uppercase words.
Shared by the clue evaluator and the candidate clue builder.
"""
from __future__ import annotations

VOWELS = set("AEIOU")


def vowel_count(w: str) -> int:
    return sum(1 for c in w if c in VOWELS)


def consonant_count(w: str) -> int:
    """Everything that is not a vowel counts, so stray non-letters are consonants."""
    return len(w) - vowel_count(w)


def has_double_letter(w: str) -> bool:
    return any(w[i] == w[i - 1] for i in range(1, len(w)))


def count_letter(w: str, letter: str) -> int:
    return sum(1 for c in w if c == letter)


def shared_letters_count(a: str, b: str) -> int:
    """Number of distinct letters present in both words."""
    return len(set(a) & set(b))


def distinct_letters(w: str) -> list[str]:
    # first-seen order; random draws index into this list
    return list(dict.fromkeys(w))
