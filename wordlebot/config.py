"""
Run-wide defaults for wordlebot.

Everything here can be overridden from the CLI (apps/cli/run.py) or by passing
arguments to the harness directly; nothing reads these values behind your back.
"""

from __future__ import annotations

# Words are always exactly this long; the engine never builds anything else.
WORD_LENGTH = 5

# Classic Wordle gives six attempts. Older experiments used 7 and 32, so the
# harness treats this as a default rather than a rule.
DEFAULT_MAX_TURNS = 6

# Best first guess by expected information against the usual ~13k-word
# frequency dictionary (see script/best_opening.py to recompute it for another list).
DEFAULT_OPENING = "tares"

DEFAULT_DICTIONARY_PATH = "data/dictionary.txt"
DEFAULT_ANSWERS_PATH = "data/answers.txt"
