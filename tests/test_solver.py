import pytest
from greedle.engine import Guess
from greedle.harness import CandidateSet, SolveHistory, Solved, Solver, SolverState, Unsolved

ISLET_DICT = ["given", "model", "chief", "islet", "tares"]
ILLS = ["bills", "fills", "gills", "hills", "kills", "mills", "pills", "tills", "wills"]


def test_solves_with_opener_then_most_frequent():
    solver = Solver()
    outcome, history = solver.solve("islet", ISLET_DICT)
    assert outcome == Solved("islet", 2)
    assert history.words == ["tares", "islet"]
    assert history[0].pattern == "Y--GY"
    assert solver.state is SolverState.SOLVED


def test_opener_hit_never_touches_the_dictionary():
    solver = Solver()
    outcome, history = solver.solve("tares", ISLET_DICT)
    assert outcome == Solved("tares", 1)
    assert len(history) == 1
    assert solver.candidates.is_borrowed


def test_filtering_copies_instead_of_mutating_dictionary():
    dictionary = list(ILLS)
    solver = Solver()
    solver.solve("wills", dictionary)
    assert dictionary == ILLS
    assert not solver.candidates.is_borrowed


def test_exhausted_when_no_candidate_survives():
    solver = Solver()
    outcome, history = solver.solve("zzzzz", ["tares", "about"])
    assert outcome == Unsolved(SolverState.EXHAUSTED)
    assert len(history) == 1
    assert solver.state is SolverState.EXHAUSTED


def test_round_cap_and_monotonic_shrink():
    solver = Solver()
    outcome, history = solver.solve("wills", ILLS)
    assert outcome == Unsolved(SolverState.UNSOLVED)
    assert history.words == ["tares", "bills", "fills", "gills", "hills", "kills"]
    assert solver.sizes == [8, 7, 6, 5, 4, 3]
    assert "wills" in solver.candidates


def test_max_rounds_shorter_budget():
    solver = Solver()
    outcome, history = solver.solve("wills", ILLS, max_rounds=3)
    assert isinstance(outcome, Unsolved)
    assert len(history) == 3


@pytest.mark.parametrize("bad", [0, 7, -1])
def test_max_rounds_guardrail(bad):
    with pytest.raises(ValueError):
        Solver().solve("wills", ILLS, max_rounds=bad)


def test_exclusions_are_skipped_and_left_untouched():
    excluded = {"bills", "fills", "gills", "hills"}
    outcome, history = Solver().solve("wills", ILLS, exclusions=excluded)
    assert outcome == Solved("wills", 5)
    assert history.words == ["tares", "kills", "mills", "pills", "wills"]
    assert excluded == {"bills", "fills", "gills", "hills"}


def test_true_answer_is_never_filtered_out():
    for answer in ILLS + ISLET_DICT:
        dictionary = ILLS + ISLET_DICT
        solver = Solver()
        outcome, history = solver.solve(answer, dictionary)
        assert len(history) <= 6
        assert solver.state is not SolverState.EXHAUSTED
        sizes = solver.sizes
        assert all(a >= b for a, b in zip(sizes, sizes[1:]))
        if isinstance(outcome, Unsolved):
            assert answer in solver.candidates
        else:
            assert outcome.word == answer


def test_candidate_set_copy_on_write():
    base = ["aaaaa", "bbbbb", "ccccc"]
    cs = CandidateSet(base)
    assert cs.is_borrowed and len(cs) == 3
    cs.retain(lambda w: w != "bbbbb")
    assert not cs.is_borrowed
    assert list(cs) == ["aaaaa", "ccccc"]
    assert base == ["aaaaa", "bbbbb", "ccccc"]
    owned = cs._words
    cs.retain(lambda w: w == "ccccc")
    assert cs._words is owned
    assert cs[0] == "ccccc"


def test_history_capacity():
    h = SolveHistory(capacity=2)
    h.append(Guess.check("crane", "tares"))
    h.append(Guess.check("crane", "crane"))
    with pytest.raises(ValueError):
        h.append(Guess.check("crane", "crane"))
    assert h.as_pairs() == [("tares", "-YYY-"), ("crane", "GGGGG")]
