"""
Wordle-style feedback for a single (answer, guess) pair.

Conventions (the enum values double as the textual pattern):
  - 'G'  : CORRECT   = right letter, right position
  - 'Y'  : MISPLACED = letter occurs elsewhere in the answer
  - '-'  : WRONG     = letter absent (or present fewer times than guessed)

Algorithm (two-pass, duplicate-safe):
  1) Mark every exact match CORRECT and consume that answer position.
  2) For each remaining guess position, scan the answer left to right for an
     unconsumed position holding the same letter. If found, mark MISPLACED
     and consume it; otherwise leave WRONG.

Excess copies of a letter in the guess are WRONG once the answer's copies
have all been consumed (guess "islet" against an answer with one 's').
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

WORD_LENGTH = 5
ALPHABET = string.ascii_lowercase


class Correctness(str, Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    WRONG = "-"


# A mask is always exactly WORD_LENGTH entries long.
FeedbackMask = Tuple[Correctness, ...]

SOLVED_MASK: FeedbackMask = (Correctness.CORRECT,) * WORD_LENGTH


def compute(answer: str, guess: str) -> FeedbackMask:
    """
    Feedback for `guess` played against the hidden `answer`.

    Examples:
      compute("stare", "tares") -> (Y, Y, Y, Y, Y)
      compute("party", "tardy") -> (Y, G, G, -, G)
    """
    mask = [Correctness.WRONG] * WORD_LENGTH
    used = [False] * WORD_LENGTH

    # Pass 1: exact positions
    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            mask[i] = Correctness.CORRECT
            used[i] = True

    # Pass 2: leftovers, first unconsumed occurrence wins
    for i in range(WORD_LENGTH):
        if mask[i] is Correctness.CORRECT:
            continue
        g = guess[i]
        for j in range(WORD_LENGTH):
            if not used[j] and answer[j] == g:
                used[j] = True
                mask[i] = Correctness.MISPLACED
                break

    return tuple(mask)


def is_solved(mask: FeedbackMask) -> bool:
    return tuple(mask) == SOLVED_MASK


def to_pattern(mask: FeedbackMask) -> str:
    """Render a mask as a compact string, e.g. "YGG-G"."""
    return "".join(c.value for c in mask)


def from_pattern(pattern: str) -> FeedbackMask:
    """
    Parse a "G"/"Y"/"-" string back into a mask.
    Raises ValueError for the wrong width or an unknown symbol.
    """
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} symbols; got {pattern!r}")
    try:
        return tuple(Correctness(ch) for ch in pattern.upper())
    except ValueError as e:
        raise ValueError(f"invalid pattern {pattern!r}; use 'G', 'Y' or '-'") from e


@dataclass(frozen=True)
class Guess:
    """A played word together with the feedback it received."""
    word: str
    mask: FeedbackMask

    @classmethod
    def check(cls, answer: str, word: str) -> "Guess":
        return cls(word=word, mask=compute(answer, word))

    @property
    def is_correct(self) -> bool:
        return is_solved(self.mask)

    @property
    def pattern(self) -> str:
        return to_pattern(self.mask)
