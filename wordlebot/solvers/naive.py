"""
Frequency-Entropy solver (naive baseline).

Idea:
  - Narrow the weighted pool by the newest feedback.
  - Score each remaining word on its OWN probability mass p = weight / total
    with goodness -p*log2(p); pick the max.

This is deliberately weak: it does not look at the feedback a guess would
produce, so it is not expected information gain. It favors words whose share
of the pool is close to 1/e. Keep it as the baseline the entropy solver is
measured against.
"""

from __future__ import annotations

import logging
from math import log2
from typing import Optional

from wordlebot.config import DEFAULT_OPENING
from wordlebot.engine import CandidatePool, History, Word
from .base import apply_feedback, opening_move, register, require_total

log = logging.getLogger(__name__)


@register
class FrequencyEntropySolver:
    id = "frequency_entropy"
    name = "Frequency Entropy (naive)"
    version = "1.0.0"

    def __init__(self, dictionary, *, opening: Optional[Word] = DEFAULT_OPENING):
        self.pool = CandidatePool(dictionary.entries)
        self.opening = opening
        self._applied = 0

    def guess(self, history: History) -> Word:
        first = opening_move(history, self.opening)
        if first is not None:
            return first

        self._applied = apply_feedback(self.pool, history, self._applied)
        total = require_total(self.pool)

        best_word = None
        best_goodness = None
        # pool is sorted, so the first maximum is also the lexicographic one
        for word, count in self.pool:
            p = count / total
            goodness = -(p * log2(p))
            if best_goodness is None or goodness > best_goodness:
                best_word, best_goodness = word, goodness

        log.debug("%s: %s (goodness %.4f, %d candidates)",
                  self.id, best_word, best_goodness, len(self.pool))
        return best_word
