"""
Consistency between candidate words and past feedback.

A candidate survives a past guess iff, were the candidate the real answer,
guessing the same word again would reproduce exactly the recorded mask:

    compute(candidate, prior.word) == prior.mask

Feedback depends only on the two words, so re-scoring against a hypothesized
answer is all the bookkeeping needed; no per-symbol green/yellow/gray rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .feedback import FeedbackMask, Word, compute, mask_to_str


@dataclass(frozen=True)
class Guess:
    """One turn of history: the word played and the feedback it got."""
    word: Word
    mask: FeedbackMask

    def matches(self, candidate: Word) -> bool:
        return matches(self, candidate)

    def __str__(self) -> str:
        return f"{self.word}:{mask_to_str(self.mask)}"


# History is the ordered sequence of turns played so far.
History = Sequence[Guess]


def matches(prior: Guess, candidate: Word) -> bool:
    """True if `candidate` could still be the answer given `prior`."""
    return compute(candidate, prior.word) == prior.mask


def filter_candidates(words: Iterable[Word], history: History) -> List[Word]:
    """
    Keep only words consistent with EVERY guess in `history`.

    Order of `words` is preserved.
    """
    return [w for w in words if all(matches(g, w) for g in history)]
