from __future__ import annotations
from typing import Dict, Sequence, Type

from greedle.engine.validation import validate_word

# Fixed first guess, chosen independently of the candidate set.
OPENING_WORD = "tares"

# ---- Global ranker registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


# ---- Base class that rankers inherit ----
class BaseRanker:
    """
    Guess-selection policy used by the Solver.

    Round 1 always plays `opener`; later rounds delegate to `pick()` with the
    current candidate set (kept in descending-frequency order).
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self, opener: str = OPENING_WORD):
        self.opener = _checked_opener(opener)

    def reset(self, *, dictionary: Sequence[str], opener: str | None = None) -> None:
        """Called once per solve attempt, before the first guess."""
        if opener is not None:
            self.opener = _checked_opener(opener)

    def next_guess(self, state: dict) -> str:
        """
        Args:
            state: dict with keys:
                - "round":      1-based round number
                - "candidates": current CandidateSet (ordered, non-empty after round 1)
                - "history":    SolveHistory so far
        """
        if state["round"] == 1:
            return self.opener
        return self.pick(state["candidates"])

    def pick(self, candidates: Sequence[str]) -> str:
        raise NotImplementedError("Override in subclass")


def _checked_opener(word: str) -> str:
    if not validate_word(word):
        raise ValueError(f"opening word must be 5 lowercase letters; got {word!r}")
    return word
