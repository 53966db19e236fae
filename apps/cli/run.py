# apps/cli/run.py
"""
CLI entry point for bulk solver benchmarks.

This script:
  1) Validates the dictionary (prints counts + SHA).
  2) Simulates a game for every (or a sampled subset of) dictionary word,
     letting the solver pick each letter and computing feedback itself.
  3) Runs with a live progress indicator and writes:
       - CSV:  per-word turns, mistakes and guess history
       - JSON: manifest with config, dictionary hash, summary, skipped words

Words that make the solver diverge or exceed --time-limit are logged and
skipped; the rest of the batch keeps going.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from hangman.datasets import (
    load_words, validate_wordlist, pretty_summary, DEFAULT_WORDS_FILE, DEFAULT_WORD_SOURCE,
)
from hangman.harness import run_batch, summarize
from hangman.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


class _PlainProgress:
    """Carriage-return progress line on stderr, at most once a second."""

    def __init__(self, total: int):
        self.total = total
        self.done = 0
        self.start = time.time()
        self.last_print = 0.0

    def update(self, n: int) -> None:
        self.done += n
        now = time.time()
        if (now - self.last_print >= 1.0) or (self.done == self.total):
            elapsed = now - self.start
            rate = (self.done / elapsed) if elapsed > 0 else 0.0
            remaining = (self.total - self.done) / rate if rate > 0 else 0.0
            pct = 100.0 * self.done / max(1, self.total)
            sys.stderr.write(
                f"\r[{self.done}/{self.total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
            )
            sys.stderr.flush()
            self.last_print = now

    def close(self) -> None:
        sys.stderr.write("\n")
        sys.stderr.flush()


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate the dictionary, run the batch with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="hangman-solver: simulate games for every dictionary word")
    ap.add_argument("-f", "--words-file", default=DEFAULT_WORDS_FILE,
                    help="dictionary file (downloaded from --word-source if missing)")
    ap.add_argument("-s", "--word-source", default=DEFAULT_WORD_SOURCE,
                    help="url to fetch words from if not cached")
    ap.add_argument("--length", type=int,
                    help="only simulate words of this length (default: all lengths)")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--workers", type=int, default=1, help="worker processes")
    ap.add_argument("--time-limit", type=float,
                    help="seconds after which one word's simulation is abandoned")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Load (and cache) the dictionary, then summarize it
    try:
        words = load_words(args.words_file, args.word_source)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    rep = validate_wordlist(args.length, args.words_file)
    print(pretty_summary(rep))

    # 2) Choose cases: unique valid words (optionally one length), sampled by seed
    cases = [w for w in dict.fromkeys(words) if w.isascii() and w.isalpha()]
    if args.length is not None:
        cases = [w for w in cases if len(w) == args.length]
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        cases = rng.sample(cases, args.sample)

    total = len(cases)
    if total == 0:
        print("Error: no words to simulate", file=sys.stderr)
        return 1

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    if mode == "bar":
        bar = tqdm(total=total, ncols=80, desc="Simulating", unit="word")
    elif mode == "plain":
        bar = _PlainProgress(total)
    else:
        bar = None

    # 4) Run
    try:
        results, skipped = run_batch(
            words, cases,
            workers=args.workers,
            time_limit_s=args.time_limit,
            progress=bar.update if bar is not None else None,
        )
    finally:
        if bar is not None:
            bar.close()

    # 5) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results, skipped)
    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": total,
        "summary": summary,
        "skipped": skipped,
    }, str(manifest_path))

    print(
        f"solved {summary['solved']}/{total} | skipped {summary['skipped']} "
        f"| turns mean {summary['turns']['mean']} | mistakes mean {summary['mistakes']['mean']}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
