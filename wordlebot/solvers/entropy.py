"""
Expected-Information solver (full entropy).

Main idea:
  - Narrow the weighted pool by the newest feedback.
  - For each candidate guess g in the pool, split the pool into the 243
    feedback buckets g would produce; bucket mass = sum of candidate weights.
  - goodness(g) = Shannon entropy of the bucket masses over the pool total,
    i.e. the expected information the feedback to g reveals. Pick the max.

Tie-break:
  - the pool is sorted by word and only a strictly larger goodness replaces the
    incumbent, so ties go to the lexicographically smallest word. Parallel
    scoring keeps the same order, so `workers` never changes the answer.

Cost is O(R^2) feedback computations per turn for a pool of R words; the
opening word skips the most expensive turn, and feedback codes are memoized
across turns and games.
"""

from __future__ import annotations

import logging
from multiprocessing import Pool
from typing import List, Optional, Sequence, Tuple

import numpy as np

from wordlebot.config import DEFAULT_OPENING
from wordlebot.engine import CandidatePool, History, Word, feedback_code, patterns
from .base import apply_feedback, opening_move, register, require_total

log = logging.getLogger(__name__)

NUM_PATTERNS = len(patterns())


def goodness(guess: Word, words: Sequence[Word], weights: np.ndarray, total: float) -> float:
    """Entropy (bits) of the feedback distribution `guess` induces over the pool."""
    codes = np.fromiter((feedback_code(c, guess) for c in words), dtype=np.intp, count=len(words))
    mass = np.bincount(codes, weights=weights, minlength=NUM_PATTERNS)
    # sorted so equal partitions sum in the same order and tie exactly
    p = np.sort(mass[mass > 0]) / total
    return float((p * np.log2(1.0 / p)).sum())


def _score_chunk(args) -> List[Tuple[float, Word]]:
    guesses, words, weights, total = args
    return [(goodness(g, words, weights, total), g) for g in guesses]


def rank(guesses: Sequence[Word], pool: CandidatePool, *, workers: int = 1) -> List[Tuple[float, Word]]:
    """
    (goodness, word) for every word in `guesses`, in the order given.

    With workers > 1 the guesses are split into contiguous chunks and scored in
    a process pool; results are reassembled in input order.
    """
    words = pool.words()
    weights = np.fromiter((w for _, w in pool), dtype=np.float64, count=len(pool))
    total = float(require_total(pool))

    if workers <= 1 or len(guesses) < 2 * workers:
        return _score_chunk((guesses, words, weights, total))

    size = -(-len(guesses) // workers)
    chunks = [(guesses[i:i + size], words, weights, total) for i in range(0, len(guesses), size)]
    with Pool(processes=workers) as procs:
        scored = procs.map(_score_chunk, chunks)
    return [item for chunk in scored for item in chunk]


def best_of(scored: Sequence[Tuple[float, Word]]) -> Tuple[float, Word]:
    """First entry with the maximal goodness (input order is the tie-break)."""
    best = None
    for item in scored:
        if best is None or item[0] > best[0]:
            best = item
    return best


@register
class ExpectedInformationSolver:
    id = "expected_information"
    name = "Entropy (Expected Information Gain)"
    version = "1.0.0"

    # Smaller pools are always scored in this process.
    PARALLEL_MIN_POOL = 256

    def __init__(self, dictionary, *, opening: Optional[Word] = DEFAULT_OPENING,
                 workers: int = 1):
        self.pool = CandidatePool(dictionary.entries)
        self.opening = opening
        self.workers = int(workers)
        self._applied = 0

    def guess(self, history: History) -> Word:
        first = opening_move(history, self.opening)
        if first is not None:
            return first

        self._applied = apply_feedback(self.pool, history, self._applied)
        require_total(self.pool)
        if len(self.pool) == 1:
            return self.pool.words()[0]

        workers = self.workers if len(self.pool) >= self.PARALLEL_MIN_POOL else 1
        H, word = best_of(rank(self.pool.words(), self.pool, workers=workers))

        log.debug("%s: %s (%.4f bits, %d candidates)", self.id, word, H, len(self.pool))
        return word
