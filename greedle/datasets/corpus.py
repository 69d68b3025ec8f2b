"""
Corpus loading: turn data files into the ordered word list the solver wants.

Files:
  - word counts: one "<word> <count>" pair per line (e.g. corpus/word-counts.txt)
  - answers:     whitespace-separated words (e.g. answers.txt)

The dictionary handed to the solver is the corpus sorted by DESCENDING count.
The sort is stable, so words with equal counts keep their file order.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Tuple

from greedle.engine.validation import validate_word


def corpus_lines(path: Path | str) -> Iterator[str]:
    """Non-blank lines of a corpus file. Raises FileNotFoundError if missing."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            line = raw.rstrip("\r\n")
            if line.strip():
                yield line


def parse_count_line(line: str) -> Tuple[str, int] | None:
    """Return (word, count) or None for anything malformed."""
    parts = line.split(" ", 1)
    if len(parts) != 2:
        return None
    word, count_str = parts[0].strip(), parts[1].strip()
    if not validate_word(word):
        return None
    try:
        count = int(count_str)
    except ValueError:
        return None
    return word, count


def load_word_counts(path: Path | str) -> List[Tuple[str, int]]:
    """
    Parse a word-count corpus in file order.
    Lines that are not "<5-letter word> <integer>" are skipped.
    """
    out: List[Tuple[str, int]] = []
    for line in corpus_lines(path):
        pair = parse_count_line(line)
        if pair is not None:
            out.append(pair)
    return out


def load_dictionary(path: Path | str) -> List[str]:
    """Words from the corpus ordered by descending count (stable for ties)."""
    pairs = sorted(load_word_counts(path), key=lambda p: p[1], reverse=True)
    return [w for w, _ in pairs]


def load_answers(path: Path | str) -> List[str]:
    """
    Read whitespace-separated answers, lowercased.
    Malformed tokens are dropped; the validator reports them.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    tokens = p.read_text(encoding="utf-8").split()
    return [w for w in (t.lower() for t in tokens) if validate_word(w)]


def letter_frequencies(words: Iterable[str]) -> Dict[str, float]:
    """
    Relative per-letter frequency over all letters in `words`.
    Values sum to 1.0 (empty input gives an empty table).
    """
    counts = Counter()
    for w in words:
        counts.update(w)
    total = sum(counts.values())
    if not total:
        return {}
    return {ch: n / total for ch, n in counts.items()}
