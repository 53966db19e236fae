"""
I/O utilities for simulation runs.

Responsibilities:
- write_csv:      one row per simulated word (word, turns, mistakes, ...).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- summarize:      aggregate turns/mistakes over a batch.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence, Tuple
import csv
import json
import subprocess
import datetime as dt

import numpy as np

CSV_FIELDS = ["word", "success", "turns", "mistakes", "time_ms", "guesses"]


def format_history(history: Sequence[Tuple[str, Sequence[int]]]) -> str:
    """
    Compact one-cell rendering of a guess history, 1-based positions.
    Example: [("a", [1]), ("t", []), ("n", [2])] -> "a:2 t:- n:3"
    """
    parts = []
    for letter, positions in history:
        where = ",".join(str(p + 1) for p in positions) if positions else "-"
        parts.append(f"{letter}:{where}")
    return " ".join(parts)


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of simulation results to CSV.

    Schema (columns):
      word, success, turns, mistakes, time_ms, guesses

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()

        for r in results:
            w.writerow({
                "word": r["word"],
                "success": r["success"],
                "turns": r["turns"],
                "mistakes": r["mistakes"],
                "time_ms": round(float(r["time_ms"]), 3),
                "guesses": format_history(r.get("history", [])),
            })

    return str(p)


def summarize(results: List[Dict], skipped: List[Dict] | None = None) -> Dict:
    """
    Aggregate a batch: counts plus mean/median/max of turns and mistakes.
    Empty batches report zeros rather than NaN.
    """
    skipped = skipped or []
    turns = np.array([r["turns"] for r in results], dtype=float)
    mistakes = np.array([r["mistakes"] for r in results], dtype=float)

    def _stats(a: np.ndarray) -> Dict:
        if a.size == 0:
            return {"mean": 0.0, "median": 0.0, "max": 0}
        return {"mean": round(float(a.mean()), 3),
                "median": float(np.median(a)),
                "max": int(a.max())}

    return {
        "solved": len(results),
        "skipped": len(skipped),
        "turns": _stats(turns),
        "mistakes": _stats(mistakes),
    }


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dictionary summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words file, length, seed, sample, workers, outdir)
      - wordlist: output of datasets.validate_wordlist(...)
      - summary: output of summarize(...)
      - skipped: words that diverged or timed out
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
