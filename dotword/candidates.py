"""
Candidate clue pool: clues that are all true for the answer, in seeded-random order.

The generator draws from this pool. Every rng draw below happens in a fixed order;
moving one changes the puzzle produced for a given seed.
"""
from __future__ import annotations

import random

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
    distinct_letters,
    has_double_letter,
    shared_letters_count,
    vowel_count,
)
from .solver import solve

MAX_SHARED_LETTERS = 4


def draw_index(rng: random.Random, n: int) -> int:
    """Uniform index in [0, n)."""
    return int(rng.random() * n)


def fisher_yates(rng: random.Random, items: list) -> None:
    """In-place seeded shuffle, walking from the end."""
    for i in range(len(items) - 1, 0, -1):
        j = draw_index(rng, i + 1)
        items[i], items[j] = items[j], items[i]


def build_candidate_clues(answer: str, picks: list[str], rng: random.Random) -> list[Clue]:
    others = [w for w in picks if w != answer]
    candidates: list[Clue] = [
        StartsWith(answer[0]),
        EndsWith(answer[-1]),
        VowelCount(vowel_count(answer)),
        ConsonantCount(consonant_count(answer)),
        NoRepeatLetters(),
    ]

    # notContains draws from the answer too, so it almost never survives the filter
    candidates.append(Contains(answer[draw_index(rng, len(answer))]))
    candidates.append(NotContains(answer[draw_index(rng, len(answer))]))

    pos = draw_index(rng, len(answer)) + 1
    candidates.append(LetterAtPos(pos, answer[pos - 1]))

    if has_double_letter(answer):
        candidates.append(HasDoubleLetter())

    letters = distinct_letters(answer)
    letter = letters[draw_index(rng, len(letters))]
    candidates.append(ContainsExactly(letter, count_letter(answer, letter)))

    if others:
        # only one of after/before can hold
        ref = others[draw_index(rng, len(others))]
        candidates.append(AlphaAfter(ref))
        candidates.append(AlphaBefore(ref))

        ref2 = others[draw_index(rng, len(others))]
        shared = shared_letters_count(answer, ref2)
        candidates.append(SharedLettersAtLeast(ref2, max(1, min(shared, MAX_SHARED_LETTERS))))

        candidates.append(NotWord(others[draw_index(rng, len(others))]))

    true_for_answer = [c for c in candidates if len(solve([answer], [c])) == 1]
    fisher_yates(rng, true_for_answer)
    return true_for_answer
