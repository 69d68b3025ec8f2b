"""
Solver core and experiment primitives.

- CandidateSet: ordered, shrinking view over the dictionary (copy-on-write).
- SolveHistory: the guesses of one attempt, capped at 6.
- Solver:       the greedy elimination loop (ACTIVE -> SOLVED/EXHAUSTED/UNSOLVED).
- run_case:     solve one hidden answer and flatten the result into a dict.
- run_batch:    run many answers in sequence, optionally excluding solved ones.

These are UI-agnostic so the CLI, notebooks and tests share them unchanged.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import (AbstractSet, Callable, Dict, Iterable, Iterator, List, Sequence, Set,
                    Tuple, Union)

from greedle.engine import Guess, matches
from greedle.rankers import BaseRanker, create_ranker

# Single source of truth for the Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_max_rounds(max_rounds: int) -> None:
    """Guardrail: the history has room for at most 6 guesses."""
    if not 1 <= max_rounds <= WORDLE_MAX_TURNS:
        raise ValueError(f"max_rounds must be between 1 and {WORDLE_MAX_TURNS}; got {max_rounds}")


class SolverState(Enum):
    ACTIVE = "active"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    UNSOLVED = "unsolved"


@dataclass(frozen=True)
class Solved:
    word: str
    rounds: int


@dataclass(frozen=True)
class Unsolved:
    # EXHAUSTED (no candidates left) or UNSOLVED (out of rounds)
    state: SolverState = SolverState.UNSOLVED


Outcome = Union[Solved, Unsolved]


class CandidateSet:
    """
    Words still consistent with every guess so far, in dictionary order.

    Starts as a borrowed reference to the caller's dictionary. The first
    `retain()` builds a private list; later calls filter that list in place.
    The borrowed dictionary is never modified.
    """

    def __init__(self, dictionary: Sequence[str]):
        self._words: Sequence[str] = dictionary
        self._owned = False

    @property
    def is_borrowed(self) -> bool:
        return not self._owned

    def retain(self, keep: Callable[[str], bool]) -> None:
        if self._owned:
            self._words[:] = [w for w in self._words if keep(w)]
        else:
            self._words = [w for w in self._words if keep(w)]
            self._owned = True

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __contains__(self, word: object) -> bool:
        return word in self._words


class SolveHistory:
    """Append-only record of the guesses of a single attempt."""

    def __init__(self, capacity: int = WORDLE_MAX_TURNS):
        self.capacity = capacity
        self._guesses: List[Guess] = []

    def append(self, guess: Guess) -> None:
        if len(self._guesses) >= self.capacity:
            raise ValueError(f"history is full ({self.capacity} guesses)")
        self._guesses.append(guess)

    @property
    def words(self) -> List[str]:
        return [g.word for g in self._guesses]

    def as_pairs(self) -> List[Tuple[str, str]]:
        """[(word, pattern), ...] as used in CSV reports."""
        return [(g.word, g.pattern) for g in self._guesses]

    def __len__(self) -> int:
        return len(self._guesses)

    def __iter__(self) -> Iterator[Guess]:
        return iter(self._guesses)

    def __getitem__(self, i: int) -> Guess:
        return self._guesses[i]


class Solver:
    """
    Greedy elimination loop for one hidden answer at a time.

    Each round the ranker proposes a word, the answer scores it, and the
    candidate set keeps only words that would have produced the same
    feedback (and are not excluded). Ends SOLVED on an all-correct mask,
    EXHAUSTED when no candidate survives, UNSOLVED when rounds run out.
    """

    def __init__(self, ranker: BaseRanker | None = None):
        self.ranker = ranker if ranker is not None else create_ranker()
        self.state = SolverState.ACTIVE
        self.history = SolveHistory()
        self.candidates: CandidateSet | None = None
        # candidate-set size after each filtering step (diagnostics)
        self.sizes: List[int] = []

    def solve(
            self,
            answer: str,
            dictionary: Sequence[str],
            exclusions: AbstractSet[str] | None = None,
            max_rounds: int = WORDLE_MAX_TURNS,
    ) -> Tuple[Outcome, SolveHistory]:
        _assert_max_rounds(max_rounds)

        self.state = SolverState.ACTIVE
        self.history = SolveHistory(capacity=max_rounds)
        self.candidates = CandidateSet(dictionary)
        self.sizes = []
        self.ranker.reset(dictionary=dictionary)

        for rnd in range(1, max_rounds + 1):
            word = self.ranker.next_guess({
                "round": rnd,
                "candidates": self.candidates,
                "history": self.history,
            })

            guess = Guess.check(answer, word)
            self.history.append(guess)

            if guess.is_correct:
                self.state = SolverState.SOLVED
                return Solved(word, rnd), self.history

            if exclusions:
                self.candidates.retain(lambda c: c not in exclusions and matches(guess, c))
            else:
                self.candidates.retain(lambda c: matches(guess, c))
            self.sizes.append(len(self.candidates))

            if not self.candidates:
                self.state = SolverState.EXHAUSTED
                return Unsolved(SolverState.EXHAUSTED), self.history

        self.state = SolverState.UNSOLVED
        return Unsolved(SolverState.UNSOLVED), self.history


def run_case(
        answer: str,
        dictionary: Sequence[str],
        *,
        ranker: BaseRanker | None = None,
        exclusions: AbstractSet[str] | None = None,
        max_rounds: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Execute one game until the solver wins or gives up.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(word, pattern)]), state (str)
    """
    solver = Solver(ranker)

    t0 = time.perf_counter_ns()
    outcome, history = solver.solve(answer, dictionary, exclusions, max_rounds)
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "answer": answer,
        "success": isinstance(outcome, Solved),
        "guesses": len(history),
        "time_ms": dt,
        "history": history.as_pairs(),
        "state": solver.state.value,
    }


def run_batch(
        answers: Iterable[str],
        dictionary: Sequence[str],
        *,
        ranker: BaseRanker | None = None,
        max_rounds: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
        exclude_solved: bool = False,
        progress: Callable[[Iterable[str]], Iterable[str]] | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back with a shared ranker.

    If 'sample' is provided, only the first K answers are used. With
    'exclude_solved', every solved answer is barred from later attempts
    (the exclusion set is private to this call). 'progress' may wrap the
    answer iterable, e.g. with tqdm.
    """
    _assert_max_rounds(max_rounds)
    ranker = ranker if ranker is not None else create_ranker()

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    exclusions: Set[str] = set()
    out: List[Dict] = []
    for ans in (progress(pool) if progress else pool):
        r = run_case(
            ans, dictionary, ranker=ranker,
            exclusions=exclusions if exclude_solved else None,
            max_rounds=max_rounds,
        )
        r["ranker_id"] = ranker.id
        out.append(r)
        if exclude_solved and r["success"]:
            exclusions.add(ans)
    return out
