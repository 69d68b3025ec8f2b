# apps/cli/run.py
"""
CLI entry point for batch solving.

This script:
  1) Validates the answers list and word-count corpus (counts, SHA, answers ⊆ corpus).
  2) Loads the corpus as a frequency-ordered dictionary and builds the ranker.
  3) Solves every answer with a live progress indicator, prints one line per
     answer plus the average score and missed words, and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, wordlist hashes, summary, git commit
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable, List

from tqdm import tqdm

from greedle.datasets import (letter_frequencies, load_answers, load_dictionary,
                              pretty_summary, validate_wordlists)
from greedle.harness import WORDLE_MAX_TURNS, run_batch, summarize
from greedle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from greedle.rankers import DEFAULT_RANKER, OPENING_WORD, create_ranker, get_ranker_ids


def _plain_progress(cases: List[str]) -> Iterable[str]:
    """Throttled one-line progress on stderr (no tqdm needed)."""
    total = len(cases)
    start = time.time()
    last_print = 0.0
    for idx, ans in enumerate(cases, 1):
        yield ans
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            last_print = now
    if total:
        sys.stderr.write("\n")
        sys.stderr.flush()


def _progress_wrapper(mode: str):
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"
    if mode == "bar":
        return lambda cases: tqdm(cases, ncols=80, desc="Solving", unit="word")
    if mode == "plain":
        return _plain_progress
    return None


def build_parser() -> argparse.ArgumentParser:
    ranker_choices = ", ".join(get_ranker_ids())

    ap = argparse.ArgumentParser(description="greedle: greedy Wordle solver batch runner")
    ap.add_argument("--answers", default="data/answers.txt",
                    help="path to answers (whitespace-separated 5-letter words)")
    ap.add_argument("--corpus", default="data/word-counts.txt",
                    help="path to word-count corpus ('<word> <count>' per line)")
    ap.add_argument("--ranker", default=DEFAULT_RANKER,
                    help=f"ranker id (one of: {ranker_choices})")
    ap.add_argument("--opener", default=OPENING_WORD, help="fixed first guess")
    ap.add_argument("--max-rounds", type=int, default=WORDLE_MAX_TURNS,
                    help=f"guess budget per answer (1..{WORDLE_MAX_TURNS})")
    ap.add_argument("--sample", type=int, help="solve only the first K answers")
    ap.add_argument("--exclude-solved", action="store_true",
                    help="never suggest an answer that an earlier case already solved")
    ap.add_argument("--strict", action="store_true",
                    help="abort if the wordlists fail validation")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="Show run progress (auto=bar on a terminal, else plain text).")
    ap.add_argument("--quiet", action="store_true", help="don't print one line per answer")
    return ap


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate datasets, run the batch, and write outputs.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not 1 <= args.max_rounds <= WORDLE_MAX_TURNS:
        parser.error(f"--max-rounds must be between 1 and {WORDLE_MAX_TURNS}")

    # 1) Validate wordlists and print a one-liner summary
    rep = validate_wordlists(args.answers, args.corpus)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")
    if args.strict and not rep["passed"]:
        print("Validation failed; fix wordlists before running.")
        return 1

    # 2) Load data
    dictionary = load_dictionary(args.corpus)
    answers = load_answers(args.answers)

    # 3) Ranker (letter_freq weights letters by the corpus they came from)
    kwargs = {"opener": args.opener}
    if args.ranker == "letter_freq":
        kwargs["table"] = letter_frequencies(dictionary)
    try:
        ranker = create_ranker(args.ranker, **kwargs)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    # 4) Run
    results = run_batch(
        answers, dictionary,
        ranker=ranker,
        max_rounds=args.max_rounds,
        sample=args.sample,
        exclude_solved=args.exclude_solved,
        progress=_progress_wrapper(args.progress),
    )

    if not args.quiet:
        for r in results:
            if r["success"]:
                print(f"{r['answer']} in {r['guesses']}")
            else:
                print(f"{r['answer']}: unsolved")

    summary = summarize(results, max_turns=args.max_rounds)
    print(f"average score: {summary['average_score']:.4f}")
    print(f"missed words: {summary['missed']}")

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=args.max_rounds)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlists": rep,
        "summary": summary,
        "ranker_id": ranker.id,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
