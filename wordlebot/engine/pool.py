"""
Weighted candidate pool with copy-on-write narrowing.

The seed table (word -> frequency) is built once per process and shared by
every game. A fresh CandidatePool only *borrows* that table. The first call to
narrow() materializes an owned, filtered list; later calls filter the owned list
in place. Games that never diverge from the base never copy it.

Invariants:
  - entries are (word, weight) with weight > 0, sorted by word
  - after narrow(g) every entry matches g
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Mapping, Sequence, Tuple, Union

from .constraints import Guess
from .feedback import Word, as_word

log = logging.getLogger(__name__)

Entry = Tuple[Word, int]


def seed(frequencies: Union[Mapping[str, int], Iterable[Tuple[str, int]]]) -> Tuple[Entry, ...]:
    """
    Build the shared, read-only base table from a frequency mapping.

    Words are normalized and must be five letters; zero weights are dropped and
    negative weights rejected. The result is sorted by word so every consumer
    iterates in the same order (this is the tie-break order for solvers).
    """
    items = frequencies.items() if isinstance(frequencies, Mapping) else frequencies
    table = {}
    for word, weight in items:
        weight = int(weight)
        if weight < 0:
            raise ValueError(f"negative weight {weight} for {word!r}")
        if weight == 0:
            continue
        w = as_word(word)
        table[w] = table.get(w, 0) + weight
    return tuple(sorted(table.items()))


class CandidatePool:
    """Words still consistent with the feedback of one game, with their weights."""

    def __init__(self, base: Sequence[Entry]):
        self._entries: Sequence[Entry] = base
        self._owned = False

    @classmethod
    def from_frequencies(cls, frequencies) -> "CandidatePool":
        return cls(seed(frequencies))

    @property
    def owned(self) -> bool:
        """False while the pool still references the shared base table."""
        return self._owned

    def narrow(self, prior: Guess) -> "CandidatePool":
        """Drop every entry inconsistent with `prior` (single pass over current entries)."""
        before = len(self._entries)
        if self._owned:
            self._entries[:] = [e for e in self._entries if prior.matches(e[0])]
        else:
            self._entries = [e for e in self._entries if prior.matches(e[0])]
            self._owned = True
        log.debug("narrowed by %s: %d -> %d candidates", prior, before, len(self._entries))
        return self

    def total_weight(self) -> int:
        return sum(weight for _, weight in self._entries)

    def words(self) -> List[Word]:
        return [w for w, _ in self._entries]

    def entries(self) -> Sequence[Entry]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, word: object) -> bool:
        return any(w == word for w, _ in self._entries)

    def __repr__(self) -> str:
        state = "owned" if self._owned else "borrowed"
        return f"CandidatePool({len(self._entries)} words, {state})"
