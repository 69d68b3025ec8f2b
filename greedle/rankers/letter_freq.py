"""
Letter-Frequency ranker (summed per-letter weights).

Idea:
  - Weight every letter by its relative frequency in a corpus (a table can be
    supplied; otherwise it is built from the dictionary on reset()).
  - Score each candidate as the sum of the weights of its DISTINCT letters and
    play the best one. Ties keep the earlier (more frequent) word.

Only round >= 2 is affected; the opener is still fixed.
"""

from __future__ import annotations
from typing import Dict, Mapping, Sequence

from greedle.datasets.corpus import letter_frequencies
from .base import BaseRanker, OPENING_WORD, register


@register
class LetterFreqRanker(BaseRanker):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def __init__(self, opener: str = OPENING_WORD, table: Mapping[str, float] | None = None):
        super().__init__(opener)
        self.table: Dict[str, float] = dict(table) if table else {}
        # an empty table means "build it from the dictionary"
        self._fixed_table = bool(table)
        self._source: Sequence[str] | None = None

    def reset(self, *, dictionary: Sequence[str], opener: str | None = None) -> None:
        super().reset(dictionary=dictionary, opener=opener)
        # rebuild only when a different dictionary object comes in
        if not self._fixed_table and dictionary is not self._source:
            self.table = letter_frequencies(dictionary)
            self._source = dictionary

    def _score_word(self, w: str) -> float:
        # each letter counts once ('slate' over 'sleet')
        return sum(self.table.get(ch, 0.0) for ch in set(w))

    def pick(self, candidates: Sequence[str]) -> str:
        best = None
        best_score = None
        for w in candidates:
            s = self._score_word(w)
            if best_score is None or s > best_score:
                best, best_score = w, s
        return best
