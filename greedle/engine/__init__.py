from .feedback import (ALPHABET, WORD_LENGTH, Correctness, Guess, compute,
                       from_pattern, is_solved, to_pattern)
from .matcher import filter_candidates, matches
from .validation import validate_word

__all__ = [
    "ALPHABET", "WORD_LENGTH", "Correctness", "Guess", "compute", "from_pattern",
    "is_solved", "to_pattern", "matches", "filter_candidates", "validate_word",
]
