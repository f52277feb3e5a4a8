"""
Daily puzzle generator: seeded word picks, answer choice, greedy clue selection.
Falls back to a fixed puzzle when no clue set is found, so generation never fails.
"""
from __future__ import annotations

import logging
import random
from typing import Sequence

from .candidates import build_candidate_clues, draw_index, fisher_yates
from .clues import Clue, ConsonantCount, EndsWith, LetterAtPos, StartsWith, VowelCount
from .letters import consonant_count, vowel_count
from .models import Puzzle
from .solver import solve

OUTER_TRIES = 200  # re-pick word sets
INNER_TRIES = 500  # clue draws per word set
PICK_COUNT = 5
CLUE_COUNT = 5
MIN_WORD_LENGTH = 4
FALLBACK_ANSWER = "ERROR"


def pick_distinct5(rng: random.Random, words: Sequence[str]) -> list[str]:
    """Shuffle an uppercased copy and keep the first 5 distinct words of length >= 4."""
    pool = [w.upper() for w in words]
    fisher_yates(rng, pool)

    picks: list[str] = []
    seen: set[str] = set()
    for w in pool:
        if not w or w in seen or len(w) < MIN_WORD_LENGTH:
            continue
        seen.add(w)
        picks.append(w)
        if len(picks) == PICK_COUNT:
            break
    return picks


def _select_clues(
    rng: random.Random, picks: list[str], answer: str, pool: list[Clue]
) -> list[Clue]:
    """
    Draw clues from the pool until CLUE_COUNT are accepted or INNER_TRIES run out.
    A clue is accepted when its type is unused, the answer survives, and the
    candidate set shrinks. Once only the answer is left, clues that keep it
    that way are accepted too.

    This relaxes the strict "every clue must shrink the set" rule on purpose:
    five picks allow at most four shrinking steps that keep the answer, so the
    strict rule can never accept five clues and every day would fall back to
    fallback_puzzle(). Do not tighten it back.
    """
    clues: list[Clue] = []
    used_types: set[str] = set()
    current = picks

    for _ in range(INNER_TRIES):
        if len(clues) >= CLUE_COUNT or not pool:
            break
        clue = pool[draw_index(rng, len(pool))]
        if clue.type in used_types:
            continue

        narrowed = solve(picks, [*clues, clue])
        if answer not in narrowed:
            continue
        if len(narrowed) >= len(current) and current != [answer]:
            continue

        clues.append(clue)
        used_types.add(clue.type)
        current = narrowed
    return clues


def search_puzzle(rng: random.Random, words: Sequence[str]) -> Puzzle | None:
    """Bounded search for a puzzle whose clues single out the answer. None if none found."""
    for attempt in range(OUTER_TRIES):
        picks = pick_distinct5(rng, words)
        if len(picks) < PICK_COUNT:
            continue

        answer = picks[draw_index(rng, PICK_COUNT)]
        pool = build_candidate_clues(answer, picks, rng)
        clues = _select_clues(rng, picks, answer, pool)
        if len(clues) != CLUE_COUNT:
            continue

        if solve(picks, clues) == [answer]:
            logging.info("Puzzle found on attempt %d (answer %s)", attempt + 1, answer)
            return Puzzle(picks=picks, answer=answer, clues=clues)
    return None


def fallback_puzzle(words: Sequence[str]) -> Puzzle:
    """Fixed puzzle from the first 5 words; the first word is the answer."""
    picks = [w.upper() for w in words[:PICK_COUNT]]
    answer = picks[0] if picks else FALLBACK_ANSWER
    clues: list[Clue] = [
        StartsWith(answer[:1]),
        EndsWith(answer[-1:]),
        VowelCount(vowel_count(answer)),
        ConsonantCount(consonant_count(answer)),
        LetterAtPos(1, answer[:1]),
    ]
    return Puzzle(picks=picks, answer=answer, clues=clues)


def generate_puzzle(seed: str, words: Sequence[str]) -> Puzzle:
    """
    Deterministic puzzle for a seed and word list: same inputs, same puzzle.
    Never raises; degrades to fallback_puzzle() if the search comes up empty.
    """
    rng = random.Random(seed)
    puzzle = search_puzzle(rng, words)
    if puzzle is not None:
        return puzzle
    logging.warning(
        "No clue set found after %d attempts for seed %r; using fallback puzzle", OUTER_TRIES, seed
    )
    return fallback_puzzle(words)
