import pytest
from wordlebot.datasets import Dictionary
from wordlebot.engine import CandidatePool, EmptyCandidatePool, Guess, compute
from wordlebot.solvers import Guesser, create_solver, get_solver_ids
from wordlebot.solvers.entropy import best_of, goodness, rank

import numpy as np

# "bcdxy" separates all four words (2 bits); each "aaaa?" word leaves two
# of them in the same bucket (1.5 bits).
FOUR = {"aaaab": 1, "aaaac": 1, "aaaad": 1, "bcdxy": 1}


def test_registry_lists_both_strategies():
    assert get_solver_ids() == ["expected_information", "frequency_entropy"]


def test_create_solver_unknown_id():
    with pytest.raises(ValueError) as exc:
        create_solver("letter_freq", Dictionary.from_frequencies(FOUR))
    assert "expected_information" in str(exc.value)


@pytest.mark.parametrize("sid", ["expected_information", "frequency_entropy"])
def test_opening_word_and_override(sid):
    d = Dictionary.from_frequencies(FOUR)
    solver = create_solver(sid, d)
    assert isinstance(solver, Guesser)
    assert solver.guess(()) == "tares"
    assert create_solver(sid, d, opening="aaaac").guess(()) == "aaaac"


def test_frequency_entropy_prefers_mass_near_one_over_e():
    # p = .1 -> .332, p = .3 -> .521, p = .6 -> .442
    d = Dictionary.from_frequencies({"crane": 1, "slate": 3, "trace": 6})
    solver = create_solver("frequency_entropy", d, opening=None)
    assert solver.guess(()) == "slate"


def test_frequency_entropy_tie_goes_to_first_word():
    solver = create_solver("frequency_entropy", Dictionary.from_frequencies(FOUR), opening=None)
    assert solver.guess(()) == "aaaab"


def test_expected_information_picks_best_split():
    solver = create_solver("expected_information", Dictionary.from_frequencies(FOUR), opening=None)
    assert solver.guess(()) == "bcdxy"


def test_goodness_values():
    pool = CandidatePool.from_frequencies(FOUR)
    scored = dict((w, H) for H, w in rank(pool.words(), pool))
    assert scored["bcdxy"] == pytest.approx(2.0)
    assert scored["aaaab"] == pytest.approx(1.5)
    assert best_of(rank(pool.words(), pool)) == (pytest.approx(2.0), "bcdxy")


def test_singleton_pool_has_zero_goodness_and_is_returned():
    d = Dictionary.from_frequencies({"crane": 5, "slate": 2})
    pool = CandidatePool(d.entries)
    pool.narrow(Guess("slate", compute("crane", "slate")))
    assert pool.words() == ["crane"]
    assert goodness("crane", pool.words(), np.array([5.0]), 5.0) == 0.0

    solver = create_solver("expected_information", d, opening="slate")
    assert solver.guess(()) == "slate"
    assert solver.guess((Guess("slate", compute("crane", "slate")),)) == "crane"


def test_ties_break_lexicographically():
    solver = create_solver("expected_information",
                           Dictionary.from_frequencies({"fghij": 1, "abcde": 1}), opening=None)
    assert solver.guess(()) == "abcde"


def test_parallel_rank_matches_sequential():
    freqs = dict(FOUR, crane=3, trace=2, slate=4, stare=1)
    pool = CandidatePool.from_frequencies(freqs)
    words = pool.words()
    assert rank(words, pool, workers=2) == rank(words, pool)


@pytest.mark.parametrize("sid", ["expected_information", "frequency_entropy"])
def test_empty_pool_fails_loudly(sid):
    d = Dictionary.from_frequencies({"crane": 1, "trace": 1})
    solver = create_solver(sid, d, opening="crane")
    with pytest.raises(EmptyCandidatePool):
        solver.guess((Guess("crane", compute("level", "crane")),))


def test_solver_narrows_by_every_unseen_turn():
    d = Dictionary.from_frequencies({"crane": 1, "raise": 1, "stare": 1, "trace": 1, "cared": 1})
    solver = create_solver("expected_information", d, opening=None)
    history = (
        Guess("raise", compute("crane", "raise")),
        Guess("trace", compute("crane", "trace")),
    )
    assert solver.guess(history) == "crane"
    assert solver.pool.owned
