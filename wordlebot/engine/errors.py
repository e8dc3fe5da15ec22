"""Exceptions raised by the engine, the dictionary loader and the harness."""


class WordleError(Exception):
    """Base class for every wordlebot error."""


class DictionaryFormatError(WordleError, ValueError):
    """A dictionary line is not `<word> <count>` with a non-negative integer count."""


class InvalidWordLength(WordleError, ValueError):
    """A word is not exactly five letters long."""


class IllegalGuess(WordleError):
    """A solver proposed a word that is not in the dictionary."""


class EmptyCandidatePool(WordleError):
    """No candidate survived the feedback so far, so there is nothing to guess."""
