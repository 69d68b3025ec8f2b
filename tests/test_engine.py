import pytest
from greedle.engine import (Correctness, Guess, compute, filter_candidates, from_pattern,
                            is_solved, matches, to_pattern, validate_word)

C, M, W = Correctness.CORRECT, Correctness.MISPLACED, Correctness.WRONG


def test_compute_all_correct():
    assert compute("stare", "stare") == (C, C, C, C, C)


def test_compute_all_misplaced():
    assert compute("stare", "tares") == (M, M, M, M, M)


def test_compute_all_wrong():
    assert compute("stare", "chomp") == (W, W, W, W, W)


def test_compute_mixed():
    assert compute("tares", "tardy") == (C, C, C, W, W)
    assert compute("party", "tardy") == (M, C, C, W, C)


# --- golden patterns (answer, guess) -> pattern; duplicates + placements ---
@pytest.mark.parametrize("answer,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("crane", "eerie", "--Y-G"),
    ("imply", "gypsy", "--G-G"),
    ("ccccc", "ccccg", "GGGG-"),
    ("islet", "tares", "Y--GY"),
])
def test_compute_golden(answer, guess, expected):
    assert to_pattern(compute(answer, guess)) == expected


def test_pattern_round_trip_and_errors():
    assert from_pattern("yg-G-") == (M, C, W, C, W)
    assert is_solved(from_pattern("GGGGG"))
    assert not is_solved(from_pattern("GGGG-"))
    with pytest.raises(ValueError):
        from_pattern("GGGG")
    with pytest.raises(ValueError):
        from_pattern("GGGGX")


def test_guess_check():
    g = Guess.check("islet", "tares")
    assert g.word == "tares"
    assert g.pattern == "Y--GY"
    assert not g.is_correct
    assert Guess.check("islet", "islet").is_correct


def test_matches_rejects_duplicate_overcount():
    g = Guess.check("imply", "gypsy")
    assert matches(g, "imply")
    assert not matches(g, "nymph")
    assert matches(g, "amply")


def test_matches_consumption_with_repeated_letters():
    g = Guess.check("ccccc", "ccccg")
    assert matches(g, "ccccc")
    assert matches(g, "ccccz")


def test_matches_misplaced_must_relocate():
    g = Guess.check("islet", "tares")
    for w in ("given", "model", "chief"):
        assert not matches(g, w)
    assert matches(g, "islet")


def test_matches_rejects_wrong_before_misplaced_of_same_letter():
    # compute() hands out MISPLACED left to right, so "-Y" for two e's can't happen
    assert to_pattern(compute("abele", "eerie")) == "Y---G"
    assert matches(Guess("eerie", from_pattern("Y---G")), "abele")
    assert not matches(Guess("eerie", from_pattern("-Y--G")), "abele")
    assert not matches(Guess("eerie", from_pattern("-Y--G")), "crane")


def test_filter_candidates_history():
    words = ["given", "model", "islet", "chief", "tares", "inlet"]
    history = [Guess.check("islet", "tares")]
    assert filter_candidates(words, history) == ["islet"]
    # empty history keeps everything, in order
    assert filter_candidates(words, []) == words


def test_validate_word():
    assert validate_word("crane") is True
    assert validate_word("CRANE") is False
    assert validate_word("cranes") is False
    assert validate_word("cr4ne") is False
    assert validate_word(None) is False


def test_each_misplaced_mark_claims_its_own_position():
    # one spare 'e' in "abele" cannot satisfy two MISPLACED e's
    assert not matches(Guess("eerie", from_pattern("YY--G")), "abele")
    assert matches(Guess("eerie", from_pattern("YY--G")), "abeee")
    assert matches(Guess.check("ebeze", "eerie"), "ebeze")
    assert Guess.check("ebeze", "eerie").pattern == "GY--G"
