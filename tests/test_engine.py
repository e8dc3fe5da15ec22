import pytest
from wordlebot.engine import (
    Correctness, Guess, InvalidWordLength, as_word, compute, feedback_code, filter_candidates,
    mask_from_str, mask_index, mask_to_str, matches, patterns, validate_guess,
)

C, M, W = Correctness.CORRECT, Correctness.MISPLACED, Correctness.WRONG


# --- golden tests (duplicates + placements); compute(answer, guess) ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("aabbb", "aaccc", (C, C, W, W, W)),
    ("aabbb", "ccaac", (W, W, M, M, W)),
    ("azzaz", "aaabb", (C, M, W, W, W)),
    ("baccc", "aaddd", (W, C, W, W, W)),
    ("abcde", "edcba", (M, M, C, M, M)),
])
def test_compute_golden(answer, guess, expected):
    assert compute(answer, guess) == expected


@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
])
def test_compute_pattern_strings(guess, answer, expected):
    assert mask_to_str(compute(answer, guess)) == expected


@pytest.mark.parametrize("w", ["crane", "level", "aaaaa", "scoop"])
def test_same_word_is_all_correct(w):
    assert compute(w, w) == (C,) * 5


def test_disjoint_words_are_all_wrong():
    assert compute("abcde", "fghij") == (W,) * 5
    assert compute("crane", "built") == (W,) * 5


def test_patterns_enumerates_every_mask_once():
    ps = patterns()
    assert len(ps) == 243
    assert len(set(ps)) == 243
    assert all(len(m) == 5 and set(m) <= {C, M, W} for m in ps)
    assert ps[0] == (C,) * 5 and ps[-1] == (W,) * 5
    # restartable: same tuple every call
    assert list(patterns()) == list(ps)


def test_mask_index_follows_patterns_order():
    assert [mask_index(m) for m in patterns()] == list(range(243))


@pytest.mark.parametrize("answer,guess", [("aabbb", "ccaac"), ("crane", "crane"), ("total", "allot")])
def test_feedback_code_is_the_mask_index(answer, guess):
    code = feedback_code(answer, guess)
    assert code == mask_index(compute(answer, guess))
    assert patterns()[code] is compute(answer, guess)


def test_only_integer_codes_are_cached():
    assert not hasattr(compute, "cache_info")
    feedback_code.cache_clear()
    compute("crane", "slate")
    compute("crane", "slate")
    info = feedback_code.cache_info()
    assert info.currsize == 1 and info.hits == 1


def test_mask_string_round_trip_and_errors():
    assert mask_from_str("GY-YG") == (C, M, W, M, C)
    with pytest.raises(ValueError):
        mask_from_str("GY-Y")
    with pytest.raises(ValueError):
        mask_from_str("GYXYG")


@pytest.mark.parametrize("answer,guess", [
    ("crane", "raise"), ("level", "belle"), ("scoop", "cools"), ("aabbb", "ccaac"),
])
def test_feedback_is_consistent_with_its_own_answer(answer, guess):
    h = Guess(guess, compute(answer, guess))
    assert matches(h, answer)
    assert h.matches(answer)


def test_filter_candidates_history():
    words = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop"]
    history = [Guess("raise", mask_from_str("YY--G"))]
    assert filter_candidates(words, history) == ["crane", "trace"]


def test_filter_candidates_is_monotonic():
    words = ["total", "stoal", "allot", "tally", "alloy", "atoll"]
    h1 = Guess("allot", compute("total", "allot"))
    h2 = Guess("stoal", compute("total", "stoal"))
    rem1 = set(filter_candidates(words, [h1]))
    rem2 = set(filter_candidates(words, [h1, h2]))
    assert "total" in rem2
    assert rem2 <= rem1


def test_as_word():
    assert as_word(" CRANE ") == "crane"
    assert as_word(b"aabbb") == "aabbb"
    for bad in ["cranes", "cran", "", "cr4ne"]:
        with pytest.raises(InvalidWordLength):
            as_word(bad)


def test_validate_guess():
    allowed = frozenset(["crane", "raise", "stare"])
    assert validate_guess("CRANE", allowed) is True
    assert validate_guess("cranes", allowed) is False
    assert validate_guess("slate", allowed) is False
    assert validate_guess(None, allowed) is False
