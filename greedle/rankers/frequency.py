"""
Frequency-order ranker.

Strategy:
  - Round 1: the fixed opening word.
  - Afterwards: the first (i.e. most frequent) word still in the candidate set.

The dictionary arrives sorted by descending corpus frequency and filtering
preserves order, so "first" is "most common word that is still possible".
Greedy: no lookahead, no scoring.
"""

from __future__ import annotations

from typing import Sequence
from .base import BaseRanker, register


@register
class FrequencyRanker(BaseRanker):
    id = "frequency"
    name = "Corpus frequency order"
    version = "1.0.0"

    def pick(self, candidates: Sequence[str]) -> str:
        return candidates[0]
