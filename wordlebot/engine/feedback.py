"""
Wordle feedback for a single (answer, guess) pair.

Conventions:
  - Correctness.CORRECT   ('G') : green  = right letter, right position
  - Correctness.MISPLACED ('Y') : yellow = letter is in the answer elsewhere
  - Correctness.WRONG     ('-') : gray   = letter absent (or already used up)

A FeedbackMask is a tuple of five Correctness values aligned with the guess.

Algorithm (two passes, order matters for repeated letters):
  1) Greens: every position where answer and guess agree is CORRECT and that
     answer position is consumed.
  2) Yellows/grays: for each remaining guess position, take the FIRST
     unconsumed answer position holding the same letter (left to right).
     Found -> MISPLACED and consume it; otherwise WRONG.

Examples:
  compute("aabbb", "aaccc") -> G G - - -
  compute("aabbb", "ccaac") -> - - Y Y -
  compute("azzaz", "aaabb") -> G Y - - -
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from itertools import product
from typing import Tuple, Union

from wordlebot.config import WORD_LENGTH
from .errors import InvalidWordLength

Word = str


class Correctness(Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    WRONG = "-"


FeedbackMask = Tuple[Correctness, ...]

# Symbol order used by patterns() and mask_index(); CORRECT sorts first.
_SYMBOLS: Tuple[Correctness, ...] = tuple(Correctness)
_DIGIT = {sym: i for i, sym in enumerate(_SYMBOLS)}


def as_word(raw: Union[str, bytes]) -> Word:
    """
    Normalize `raw` to a lowercase five-letter Word.

    Raises InvalidWordLength for anything that is not exactly five letters.
    """
    if isinstance(raw, bytes):
        raw = raw.decode("ascii")
    w = raw.strip().lower()
    if len(w) != WORD_LENGTH or not w.isalpha():
        raise InvalidWordLength(f"expected a {WORD_LENGTH}-letter word, got {raw!r}")
    return w


def _score(answer: Word, guess: Word) -> FeedbackMask:
    n = len(guess)
    mask = [Correctness.WRONG] * n
    consumed = [False] * n

    # Pass 1: greens
    for i in range(n):
        if answer[i] == guess[i]:
            mask[i] = Correctness.CORRECT
            consumed[i] = True

    # Pass 2: first unconsumed matching answer position wins
    for i in range(n):
        if mask[i] is Correctness.CORRECT:
            continue
        for j in range(n):
            if not consumed[j] and answer[j] == guess[i]:
                mask[i] = Correctness.MISPLACED
                consumed[j] = True
                break

    return tuple(mask)


@lru_cache(maxsize=None)
def patterns() -> Tuple[FeedbackMask, ...]:
    """All 3**5 = 243 masks, lexicographic over (CORRECT, MISPLACED, WRONG)."""
    return tuple(product(_SYMBOLS, repeat=WORD_LENGTH))


@lru_cache(maxsize=1 << 20)
def feedback_code(answer: Word, guess: Word) -> int:
    """
    mask_index(compute(answer, guess)), memoized.

    This is the only cache of scored pairs: solvers call it for every
    (guess, candidate) pair each turn, and compute() is a table lookup on it.
    """
    return mask_index(_score(answer, guess))


def compute(answer: Word, guess: Word) -> FeedbackMask:
    """
    Score `guess` against the hidden `answer`.

    Both arguments must already be Words (see as_word). The returned mask is
    the shared instance from patterns().
    """
    return patterns()[feedback_code(answer, guess)]


def mask_index(mask: FeedbackMask) -> int:
    """Position of `mask` inside patterns() (base-3 digits, most significant first)."""
    idx = 0
    for sym in mask:
        idx = idx * 3 + _DIGIT[sym]
    return idx


def mask_to_str(mask: FeedbackMask) -> str:
    """(CORRECT, WRONG, ...) -> 'G-...'"""
    return "".join(sym.value for sym in mask)


def mask_from_str(text: str) -> FeedbackMask:
    """Inverse of mask_to_str; raises ValueError on unknown characters or bad length."""
    if len(text) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} symbols, got {text!r}")
    return tuple(Correctness(ch) for ch in text)


def is_solved(mask: FeedbackMask) -> bool:
    return all(sym is Correctness.CORRECT for sym in mask)
