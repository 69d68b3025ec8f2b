"""
Lightweight word validation.

The engine itself trusts its inputs; loaders and the CLI use this to decide
whether a token may enter the dictionary at all. A word is valid iff:
  - it is a string
  - it has exactly WORD_LENGTH characters
  - every character is in ALPHABET (ASCII lowercase)
"""

from __future__ import annotations

from .feedback import ALPHABET, WORD_LENGTH

_LETTERS = frozenset(ALPHABET)


def validate_word(word) -> bool:
    """Return True if `word` is a well-formed 5-letter lowercase word."""
    if not isinstance(word, str):
        return False
    return len(word) == WORD_LENGTH and all(ch in _LETTERS for ch in word)
