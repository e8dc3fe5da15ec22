from .validator import validate_dataset, pretty_summary
from .dictionary import Dictionary, parse_dictionary, load_dictionary, load_answers

__all__ = [
    "validate_dataset", "pretty_summary",
    "Dictionary", "parse_dictionary", "load_dictionary", "load_answers",
]
