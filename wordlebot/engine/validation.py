"""
Guess validation.

A guess is legal iff it is a five-letter word present in the dictionary. The
harness treats an illegal guess as a solver bug: require_legal() raises
IllegalGuess and the game is aborted.
"""

from __future__ import annotations

from typing import AbstractSet

from .errors import IllegalGuess, InvalidWordLength
from .feedback import Word, as_word


def validate_guess(word: object, allowed: AbstractSet[Word]) -> bool:
    """
    Return True if `word` is a legal guess.

    `allowed` should be a set (Dictionary.words is a frozenset); membership is
    checked after case/whitespace normalization.
    """
    if not isinstance(word, (str, bytes)):
        return False
    try:
        w = as_word(word)
    except (InvalidWordLength, UnicodeDecodeError):
        return False
    return w in allowed


def require_legal(word: object, allowed: AbstractSet[Word]) -> None:
    """
    Raise IllegalGuess unless `word` is exactly a member of `allowed`.

    No normalization: the harness scores the word as given, so " crane" or
    "CRANE" from a solver is illegal even though validate_guess() accepts it.
    """
    if not isinstance(word, str) or word not in allowed:
        raise IllegalGuess(f"solver proposed {word!r}, which is not in the dictionary")
