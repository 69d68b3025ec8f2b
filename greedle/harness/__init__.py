from .core import (WORDLE_MAX_TURNS, CandidateSet, SolveHistory, Solved, Solver, SolverState,
                   Unsolved, run_batch, run_case)
from .io import write_csv, write_manifest
from .stats import summarize

__all__ = ["WORDLE_MAX_TURNS", "CandidateSet", "SolveHistory", "Solved", "Solver",
           "SolverState", "Unsolved", "run_case", "run_batch", "write_csv", "write_manifest",
           "summarize"]
