"""
Dataset validator for greedle.

What this module does:
- Validate the answers file (whitespace-separated 5-letter words) and the
  word-count corpus ("<word> <count>" per line) that becomes the dictionary.
- Enforce formatting rules (lowercase, a–z only, exact length 5, integer counts).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Check that answers ⊆ corpus (an answer missing from the corpus can never be
  guessed after the opener).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from greedle.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/answers.txt", "data/word-counts.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from greedle.engine.feedback import WORD_LENGTH
from greedle.engine.validation import validate_word
from .corpus import corpus_lines, parse_count_line


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID entries after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid tokens/lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, corpus) pair."""
    N: int
    answers: FileReport
    corpus: FileReport
    answers_subset_corpus: bool
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _check_answers(path: Path) -> Tuple[List[str], int]:
    """
    Answers are whitespace-separated; every token must already be a valid
    lowercase word. Returns (valid_words, invalid_count).
    """
    valid: List[str] = []
    invalid = 0
    for tok in path.read_text(encoding="utf-8").split():
        if validate_word(tok):
            valid.append(tok)
        else:
            invalid += 1
    return valid, invalid


def _check_corpus(path: Path) -> Tuple[List[str], int]:
    """
    Corpus lines must be "<word> <count>". Blank lines are tolerated (a
    trailing newline is common); anything else malformed counts as invalid.
    """
    valid: List[str] = []
    invalid = 0
    for line in corpus_lines(path):
        pair = parse_count_line(line)
        if pair is None:
            invalid += 1
        else:
            valid.append(pair[0])
    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(answers_path: str, corpus_path: str) -> Dict:
    """
    Validate the answers list and the word-count corpus.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - answers ⊆ corpus check
          - `passed` boolean (strict: requires non-empty, no invalids, subset OK)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    ans_p = Path(answers_path)
    cor_p = Path(corpus_path)

    ans_exists = ans_p.exists()
    cor_exists = cor_p.exists()

    # Early return if either file is missing
    if not ans_exists or not cor_exists:
        if not ans_exists:
            issues.append(f"answers file not found: {answers_path}")
        if not cor_exists:
            issues.append(f"corpus file not found: {corpus_path}")
        rep = ValidationReport(
            N=WORD_LENGTH,
            answers=FileReport(answers_path, ans_exists, 0, "", 0, 0),
            corpus=FileReport(corpus_path, cor_exists, 0, "", 0, 0),
            answers_subset_corpus=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    answers, ans_invalid = _check_answers(ans_p)
    corpus, cor_invalid = _check_corpus(cor_p)

    ans_report = _file_report(ans_p, answers, ans_invalid)
    cor_report = _file_report(cor_p, corpus, cor_invalid)

    answers_set = set(answers)
    corpus_set = set(corpus)

    subset_ok = answers_set.issubset(corpus_set)
    if not subset_ok:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        missing = sorted(answers_set - corpus_set)[:5]
        issues.append(f"answers not subset of corpus (e.g., {missing})")

    if ans_report.count == 0:
        issues.append("answers file contains 0 valid words")
    if cor_report.count == 0:
        issues.append("corpus file contains 0 valid entries")

    if ans_invalid:
        issues.append(f"answers has {ans_invalid} invalid token(s)")
    if cor_invalid:
        issues.append(f"corpus has {cor_invalid} invalid line(s)")

    if ans_report.count != ans_report.unique_count:
        issues.append("answers contains duplicates")
    if cor_report.count != cor_report.unique_count:
        issues.append("corpus contains duplicate words")

    passed = (
            subset_ok
            and ans_invalid == 0
            and cor_invalid == 0
            and ans_report.count > 0
            and cor_report.count > 0
    )

    rep = ValidationReport(
        N=WORD_LENGTH,
        answers=ans_report,
        corpus=cor_report,
        answers_subset_corpus=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | answers=2315 (uniq=2315, sha=abc123...) | corpus=12972 (uniq=12972, sha=def456...) | answers⊆corpus=True | OK
    """
    a = report["answers"]
    b = report["corpus"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| corpus={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆corpus={report['answers_subset_corpus']} | {status}"
    )
