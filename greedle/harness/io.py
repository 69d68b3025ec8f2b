"""
Report files for a batch run: one CSV row per answer plus a JSON manifest.

Patterns in the CSV get a leading apostrophe so spreadsheets keep "-GYY-"
as text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from .core import WORDLE_MAX_TURNS

BASE_FIELDS = ["ranker", "answer", "success", "state", "guesses", "time_ms"]


def _row(result: Dict, max_turns: int) -> Dict:
    row = {
        "ranker": result.get("ranker_id", "?"),
        "answer": result["answer"],
        "success": result["success"],
        "state": result.get("state", ""),
        "guesses": result["guesses"],
        "time_ms": round(float(result["time_ms"]), 3),
    }
    history = result.get("history", [])
    for rnd in range(1, max_turns + 1):
        word, patt = history[rnd - 1] if rnd <= len(history) else ("", "")
        row[f"guess_{rnd}"] = word
        row[f"patt_{rnd}"] = "'" + patt if patt else ""
    return row


def write_csv(results: List[Dict], path: str, max_turns: int = WORDLE_MAX_TURNS) -> str:
    """Columns: ranker, answer, success, state, guesses, time_ms, then guess_k/patt_k per round."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = list(BASE_FIELDS)
    for rnd in range(1, max_turns + 1):
        fields += [f"guess_{rnd}", f"patt_{rnd}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        w.writerows(_row(r, max_turns) for r in results)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump run config, wordlist report and summary as indented JSON."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
