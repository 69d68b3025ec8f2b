"""
Batch statistics over run_case() results.

The headline numbers are the ones the batch driver prints:
  - average score: mean number of guesses over SOLVED cases only
  - missed words:  number of cases that were not solved
plus a guess-count distribution (index k = solved in k guesses).
"""

from __future__ import annotations

from typing import Dict, List

import numpy as np

from .core import WORDLE_MAX_TURNS


def summarize(results: List[Dict], max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=np.int64)
    missed = len(results) - solved.size

    # bincount needs minlength so the table always covers 0..max_turns
    dist = np.bincount(solved, minlength=max_turns + 1) if solved.size else \
        np.zeros(max_turns + 1, dtype=np.int64)

    return {
        "cases": len(results),
        "solved": int(solved.size),
        "missed": int(missed),
        "average_score": float(solved.mean()) if solved.size else float("nan"),
        "distribution": {k: int(dist[k]) for k in range(1, max_turns + 1)},
    }
