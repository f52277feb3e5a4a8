import random

import pytest

from dotword.candidates import build_candidate_clues, draw_index, fisher_yates
from dotword.clues import AlphaAfter, AlphaBefore, ContainsExactly, LetterAtPos, NotWord
from dotword.solver import satisfies

PICKS = ["APPLE", "LEMON", "MANGO", "GRAPE", "PEACH"]


@pytest.mark.parametrize("answer", PICKS)
def test_every_candidate_is_true_for_answer(answer):
    pool = build_candidate_clues(answer, PICKS, random.Random("pool-" + answer))
    assert pool
    assert all(satisfies(answer, c) for c in pool)


def test_same_seed_same_pool():
    a = build_candidate_clues("APPLE", PICKS, random.Random("seed"))
    b = build_candidate_clues("APPLE", PICKS, random.Random("seed"))
    assert a == b


def test_alpha_pair_never_both_kept():
    for i in range(20):
        pool = build_candidate_clues("MANGO", PICKS, random.Random(i))
        types = [c.type for c in pool]
        assert not ("alphaAfter" in types and "alphaBefore" in types)
        refs = [c.word for c in pool if isinstance(c, (AlphaAfter, AlphaBefore, NotWord))]
        assert "MANGO" not in refs


def test_constructed_clues_always_survive():
    for i in range(20):
        pool = build_candidate_clues("BANANA", ["BANANA", "CHERRY"], random.Random(i))
        types = {c.type for c in pool}
        # true by construction
        assert {"startsWith", "endsWith", "vowelCount", "consonantCount", "letterAtPos",
                "containsExactly", "contains", "notWord"} <= types
        # every letter of BANANA is in BANANA, and it repeats letters
        assert "notContains" not in types
        assert "noRepeatLetters" not in types
        exact = next(c for c in pool if isinstance(c, ContainsExactly))
        assert exact.count == "BANANA".count(exact.letter)
        at = next(c for c in pool if isinstance(c, LetterAtPos))
        assert 1 <= at.pos <= 6


def test_double_letter_only_when_present():
    pool = build_candidate_clues("APPLE", PICKS, random.Random(1))
    assert "hasDoubleLetter" in {c.type for c in pool}
    pool = build_candidate_clues("LEMON", PICKS, random.Random(1))
    assert "hasDoubleLetter" not in {c.type for c in pool}


def test_no_reference_clues_without_others():
    pool = build_candidate_clues("LEMON", ["LEMON"], random.Random(3))
    types = {c.type for c in pool}
    assert types.isdisjoint({"alphaAfter", "alphaBefore", "sharedLettersAtLeast", "notWord"})


def test_fisher_yates_is_a_permutation():
    items = list(range(10))
    fisher_yates(random.Random(5), items)
    assert sorted(items) == list(range(10))
    again = list(range(10))
    fisher_yates(random.Random(5), again)
    assert items == again


def test_draw_index_in_range():
    rng = random.Random(9)
    assert all(0 <= draw_index(rng, 7) < 7 for _ in range(200))
