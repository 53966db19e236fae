"""
Solver engine: the constraint state of one Hangman session.

State:
  - pattern    : one cell per position, None or the letter placed there
  - excluded   : letters confirmed absent, in the order they were reported
  - used       : letters guessed or placed (never suggested again)
  - candidates : words still consistent with pattern + excluded
  - history    : HistoryFrame per applied guess, for undo

A turn is: apply_guess -> propagate (prune + fill_certain_letters) ->
solution(). apply_guess deliberately does not filter; pruning is a separate
step so forced-letter inference sees the pruned candidates of this turn.

Undo restores the snapshot and resets candidates to the full length-L
dictionary; the next propagate() recomputes them from scratch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

from .constraints import certain_letters, prune_candidates
from .errors import InvalidConfiguration, NoCandidatesRemaining, NothingToUndo
from .scoring import LetterScore, rank_letters
from .validation import Feedback, check_feedback

log = logging.getLogger(__name__)

PLACEHOLDER = "_"


@dataclass(frozen=True)
class HistoryFrame:
    """State right before one applied guess, plus the guess itself."""
    pattern: Tuple[Optional[str], ...]
    excluded: Tuple[str, ...]
    used: FrozenSet[str]
    letter: str
    positions: Tuple[int, ...]


class HangmanEngine:
    def __init__(self, words: Iterable[str], L: int):
        L = int(L)
        if L <= 0:
            raise InvalidConfiguration(f"Word length must be a positive integer; got {L}")

        # Ordered, de-duplicated, exactly-L lowercase words
        pool = (w.strip().lower() for w in words)
        self.original: Tuple[str, ...] = tuple(
            dict.fromkeys(w for w in pool if len(w) == L and w.isalpha() and w.isascii())
        )
        if not self.original:
            raise InvalidConfiguration(f"No {L}-letter words in the dictionary")

        self.L = L
        self.pattern: List[Optional[str]] = [None] * L
        self.excluded: List[str] = []
        self.used: Set[str] = set()
        self.candidates: List[str] = list(self.original)
        self.history: List[HistoryFrame] = []

    # ---- feedback ----

    def apply_guess(self, letter: str, positions: Iterable[int]) -> Feedback:
        """
        Record feedback for `letter`: absent if `positions` is empty, else
        present at exactly those 0-based cells.

        Raises InvalidGuessInput (state untouched) if the letter was used or
        a position is out of range / already placed.
        """
        letter, cells = check_feedback(letter, positions, pattern=self.pattern, used=self.used)

        self.history.append(HistoryFrame(
            pattern=tuple(self.pattern),
            excluded=tuple(self.excluded),
            used=frozenset(self.used),
            letter=letter,
            positions=tuple(cells),
        ))

        if not cells:
            self.excluded.append(letter)
        for i in cells:
            self.pattern[i] = letter
        self.used.add(letter)

        log.debug("applied %s at %s -> %s", letter, cells or "none", self.render())
        return letter, cells

    # ---- consistency propagation ----

    def prune(self) -> List[Set[str]]:
        """Filter candidates; return the potential letters per cell."""
        before = len(self.candidates)
        self.candidates, potentials = prune_candidates(
            self.candidates, self.pattern, set(self.excluded)
        )
        log.debug("pruned %d -> %d candidates", before, len(self.candidates))
        return potentials

    def fill_certain_letters(self, potentials: List[Set[str]]) -> List[Tuple[int, str]]:
        """Place every letter that is the only option for its cell."""
        forced = certain_letters(self.pattern, potentials)
        for i, letter in forced:
            self.pattern[i] = letter
            self.used.add(letter)
        if forced:
            log.debug("forced letters: %s", forced)
        return forced

    def propagate(self) -> List[Tuple[int, str]]:
        return self.fill_certain_letters(self.prune())

    # ---- suggestions ----

    def compute_scores(self) -> List[LetterScore]:
        return rank_letters(self.candidates, self.used)

    # ---- undo ----

    def undo(self) -> Feedback:
        """
        Roll back the most recent apply_guess. Candidates are reset to the
        full dictionary; call propagate() to narrow them again.
        """
        if not self.history:
            raise NothingToUndo("Nothing to undo")
        frame = self.history.pop()
        self.pattern = list(frame.pattern)
        self.excluded = list(frame.excluded)
        self.used = set(frame.used)
        self.candidates = list(self.original)
        log.debug("undid %s, pattern back to %s", frame.letter, self.render())
        return frame.letter, list(frame.positions)

    # ---- termination ----

    def solution(self) -> Optional[str]:
        """
        The solved word if exactly one candidate is left, None while two or
        more remain.
        """
        if not self.candidates:
            raise NoCandidatesRemaining(
                "No possible words left! Is it in the dictionary / was feedback wrong?"
            )
        if len(self.candidates) == 1:
            return self.candidates[0]
        return None

    # ---- display ----

    def render(self) -> str:
        return " ".join(PLACEHOLDER if cell is None else cell for cell in self.pattern)

    def guesses(self) -> List[Feedback]:
        """Applied guesses, oldest first."""
        return [(f.letter, list(f.positions)) for f in self.history]
