"""
Frequency dictionary and answer list loading.

Dictionary file format, one entry per line:

    <5-letter word><space><integer frequency>

Blank lines are ignored. Anything else is fatal: a missing separator or a
count that is not a non-negative integer raises DictionaryFormatError, a word
that is not five letters raises InvalidWordLength. There is no partial
dictionary.

load_dictionary() parses each file at most once per process and hands every
caller the same immutable Dictionary.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet, Iterable, List, Tuple

from wordlebot.engine.errors import DictionaryFormatError, InvalidWordLength
from wordlebot.engine.feedback import Word, as_word
from wordlebot.engine.pool import Entry, seed
from .io import read_lines, read_tokens

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dictionary:
    """Legal guesses plus the frequency table every CandidatePool is seeded from."""
    words: FrozenSet[Word]
    entries: Tuple[Entry, ...]

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

    @classmethod
    def from_frequencies(cls, frequencies) -> "Dictionary":
        """Build from a {word: count} mapping (handy for tests and notebooks)."""
        items = list(frequencies.items()) if hasattr(frequencies, "items") else list(frequencies)
        words = frozenset(as_word(w) for w, _ in items)
        return cls(words=words, entries=seed(items))


def _parse_line(line: str, where: str) -> Tuple[Word, int]:
    word, sep, count = line.strip().partition(" ")
    if not sep:
        raise DictionaryFormatError(f"{where}: expected '<word> <count>', got {line!r}")
    try:
        n = int(count.strip())
    except ValueError as e:
        raise DictionaryFormatError(f"{where}: count is not an integer: {count!r}") from e
    if n < 0:
        raise DictionaryFormatError(f"{where}: count must be non-negative, got {n}")
    try:
        w = as_word(word)
    except InvalidWordLength as e:
        raise InvalidWordLength(f"{where}: {e}") from e
    return w, n


def parse_dictionary(lines: Iterable[str], source: str = "<dictionary>") -> Dictionary:
    """Parse dictionary lines; see the module docstring for the format."""
    counts: List[Tuple[Word, int]] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        counts.append(_parse_line(line, f"{source}:{lineno}"))
    return Dictionary(words=frozenset(w for w, _ in counts), entries=seed(counts))


@lru_cache(maxsize=None)
def _load_cached(resolved: str) -> Dictionary:
    d = parse_dictionary(read_lines(resolved), source=resolved)
    log.info("loaded %d words (%d with non-zero frequency) from %s",
             len(d.words), len(d.entries), resolved)
    return d


def load_dictionary(path: Path | str) -> Dictionary:
    """Load (once per process) and return the shared Dictionary for `path`."""
    return _load_cached(str(Path(path).resolve()))


def load_answers(path: Path | str) -> List[Word]:
    """Whitespace-separated answers, one game each, in file order."""
    return [as_word(tok) for tok in read_tokens(path)]
