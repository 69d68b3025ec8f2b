from __future__ import annotations
from typing import List
from .base import BaseRanker, OPENING_WORD, REGISTRY, register

from . import frequency  # noqa: F401
from . import letter_freq  # noqa: F401

DEFAULT_RANKER = "frequency"


def create_ranker(ranker_id: str = DEFAULT_RANKER, **kwargs) -> BaseRanker:
    """
    Factory: instantiate a registered ranker by id.
    """
    try:
        cls = REGISTRY[ranker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown ranker id: {ranker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_ranker_ids() -> List[str]:
    """
    Return all registered ranker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = ["BaseRanker", "OPENING_WORD", "REGISTRY", "register", "create_ranker",
           "get_ranker_ids", "DEFAULT_RANKER"]
