"""
Simulation harness core primitives.

- run_case:  play one hidden word with the letter-frequency heuristic.
- run_batch: play many words; a word that diverges or times out is logged
             and skipped, never aborting the rest of the batch.

The harness computes its own feedback from the known target, so these runs
benchmark the solver. Each case builds its own engine; the dictionary passed
in is only read.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests without changes.
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from hangman.engine import HangmanEngine, feedback
from hangman.engine.errors import (
    InvalidConfiguration,
    InvalidGuessInput,
    NoCandidatesRemaining,
    SimulationDivergence,
    SimulationTimeout,
)

log = logging.getLogger(__name__)


def run_case(
        words: Sequence[str],
        target: str,
        *,
        time_limit_s: float | None = None,
) -> Dict:
    """
    Play one game against `target` until the engine is down to one word.

    Args:
        words:         full dictionary (any lengths; filtered by the engine)
        target:        the hidden word
        time_limit_s:  abandon the case after this many seconds

    Returns:
        dict with keys:
            word (str), success (bool), turns (int), mistakes (int),
            time_ms (float), history (list[(letter, positions)])

    Raises:
        SimulationDivergence: target length absent from the dictionary, solved
                              to the wrong word, candidates exhausted, feedback
                              landing on an inferred cell, or no unguessed
                              letter left to try
        SimulationTimeout:    time_limit_s exceeded
    """
    target = target.strip().lower()
    try:
        engine = HangmanEngine(words, len(target))
    except InvalidConfiguration as e:
        raise SimulationDivergence(f"{target}: {e}") from e
    mistakes = 0

    t0 = time.perf_counter()

    def _elapsed_ms() -> float:
        return (time.perf_counter() - t0) * 1000.0

    while True:
        try:
            solved = engine.solution()
        except NoCandidatesRemaining as e:
            raise SimulationDivergence(
                f"{target}: candidates exhausted after {engine.guesses()}"
            ) from e

        if solved is not None:
            if solved != target:
                raise SimulationDivergence(f"{target}: converged to {solved!r}")
            return {
                "word": target,
                "success": True,
                "turns": len(engine.history),
                "mistakes": mistakes,
                "time_ms": _elapsed_ms(),
                "history": engine.guesses(),
            }

        if time_limit_s is not None and _elapsed_ms() > time_limit_s * 1000.0:
            raise SimulationTimeout(f"{target}: abandoned after {time_limit_s}s")

        scores = engine.compute_scores()
        if not scores:
            raise SimulationDivergence(
                f"{target}: every letter used, {len(engine.candidates)} candidates left"
            )

        # Top-ranked letter; ties already resolved in alphabet order
        letter = scores[0][0]
        positions = feedback(letter, target)
        if not positions:
            mistakes += 1

        # Inference filled a cell with a letter the target lacks there
        try:
            engine.apply_guess(letter, positions)
        except InvalidGuessInput as e:
            raise SimulationDivergence(f"{target}: feedback for {letter} contradicts {engine.render()}") from e
        engine.propagate()


def _run_chunk(
        words: Sequence[str],
        targets: Sequence[str],
        time_limit_s: float | None,
) -> Tuple[List[Dict], List[Dict]]:
    """Run a slice of a batch; module-level so worker processes can import it."""
    results: List[Dict] = []
    skipped: List[Dict] = []
    for target in targets:
        try:
            results.append(run_case(words, target, time_limit_s=time_limit_s))
        except (SimulationDivergence, SimulationTimeout) as e:
            log.warning("skipping %s: %s", target, e)
            skipped.append({"word": target, "error": f"{type(e).__name__}: {e}"})
    return results, skipped


def run_batch(
        words: Sequence[str],
        targets: Sequence[str],
        *,
        workers: int = 1,
        time_limit_s: float | None = None,
        progress: Optional[Callable[[int], None]] = None,
) -> Tuple[List[Dict], List[Dict]]:
    """
    Simulate every word in `targets`.

    With workers > 1 the targets are split into chunks and run in a process
    pool; result order then follows chunk completion, not `targets` order.
    `progress(n)` is called after every n finished words.

    Returns:
        (results, skipped)
          results: run_case dicts for the words that solved correctly
          skipped: {"word", "error"} for words that diverged or timed out
    """
    targets = list(targets)
    results: List[Dict] = []
    skipped: List[Dict] = []

    if workers <= 1:
        for target in targets:
            r, s = _run_chunk(words, [target], time_limit_s)
            results.extend(r)
            skipped.extend(s)
            if progress is not None:
                progress(1)
        return results, skipped

    workers = min(workers, os.cpu_count() or 1, max(1, len(targets)))
    # Several chunks per worker so progress keeps moving
    size = max(1, len(targets) // (workers * 8))
    chunks = [targets[i:i + size] for i in range(0, len(targets), size)]

    words = list(words)
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = {
            executor.submit(_run_chunk, words, chunk, time_limit_s): len(chunk)
            for chunk in chunks
        }
        for fut in as_completed(futures):
            r, s = fut.result()
            results.extend(r)
            skipped.extend(s)
            if progress is not None:
                progress(futures[fut])

    return results, skipped
