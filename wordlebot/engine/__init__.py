from .errors import (
    WordleError, DictionaryFormatError, InvalidWordLength, IllegalGuess, EmptyCandidatePool,
)
from .feedback import (
    Correctness, FeedbackMask, Word, as_word, compute, feedback_code, patterns, mask_index, mask_to_str,
    mask_from_str, is_solved,
)
from .constraints import Guess, History, matches, filter_candidates
from .validation import validate_guess, require_legal
from .pool import CandidatePool, seed

__all__ = [
    "WordleError", "DictionaryFormatError", "InvalidWordLength", "IllegalGuess",
    "EmptyCandidatePool",
    "Correctness", "FeedbackMask", "Word", "as_word", "compute", "feedback_code", "patterns", "mask_index",
    "mask_to_str", "mask_from_str", "is_solved",
    "Guess", "History", "matches", "filter_candidates",
    "validate_guess", "require_legal",
    "CandidatePool", "seed",
]
