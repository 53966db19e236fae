"""
Interactive driver: a human plays the host and reports each guess result.

Each turn:
  1) show the pattern, excluded letters and candidate count
  2) list every candidate when few are left, else the top scored letters
  3) read one line: feedback `<letter> [positions...]`, `undo`, or blank
  4) apply, propagate, check for a solution

The session owns no game state of its own; everything lives in the engine.
Input and output are injected callables so tests can script a game.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from hangman.engine import HangmanEngine, is_undo, parse_feedback
from hangman.engine.errors import InvalidConfiguration, InvalidGuessInput, NothingToUndo

log = logging.getLogger(__name__)

HELPTEXT = """Type your guess in the following format: <letter> [list of positions the letter appears in separated by spaces, or nothing if the letter is not present in the word]
    example 1: the letter n appears at the start of the word: type `n 1`
    example 2: the letter e appears as the second and fourth letter: type `e 2 4`
    example 3: the letter g does not appear in the word: type `g`
    type `undo` to take back the last guess"""

PROMPT = "Type the letter you guessed, and if/where it appears in the word (hit enter for help): "


@dataclass
class SessionConfig:
    num_suggestions: int = 5     # top-N letters shown per turn
    display_threshold: int = 10  # list candidates once this few remain

    def __post_init__(self):
        if self.num_suggestions < 1:
            raise InvalidConfiguration(f"num_suggestions must be >= 1; got {self.num_suggestions}")
        if self.display_threshold < 1:
            raise InvalidConfiguration(f"display_threshold must be >= 1; got {self.display_threshold}")


class InteractiveSession:
    def __init__(
            self,
            engine: HangmanEngine,
            config: SessionConfig | None = None,
            *,
            read_line: Optional[Callable[[str], str]] = None,
            write: Optional[Callable[[str], None]] = None,
    ):
        self.engine = engine
        self.config = config or SessionConfig()
        self.read_line = read_line or input
        self.write = write or print

    # ---- display ----

    def print_stats(self) -> None:
        e = self.engine
        self.write(f"current guess: {e.render()}")
        if e.excluded:
            self.write(f"letters not present: {' '.join(e.excluded)}")
        self.write(f"{len(e.candidates)} possible words")

    def show_scores_or_guesses(self) -> None:
        e = self.engine
        if len(e.candidates) <= self.config.display_threshold:
            self.write("Possibilities:")
            for word in e.candidates:
                self.write(word)
            return

        n = self.config.num_suggestions
        self.write(f"Top {n} guesses:")
        for i, (letter, score) in enumerate(e.compute_scores()[:n], start=1):
            self.write(f"{i}. {letter}: {score}")

    # ---- one turn ----

    def step(self) -> None:
        """
        Read lines until one is acted on: a valid guess or a successful undo.
        Bad input and empty history are reported and re-prompted.
        """
        e = self.engine
        while True:
            raw = self.read_line(PROMPT).strip()

            if not raw:
                self.write(HELPTEXT)
                continue

            if is_undo(raw):
                try:
                    letter, _ = e.undo()
                except NothingToUndo as err:
                    self.write(str(err))
                    continue
                self.write(f"Undid guess {letter}")
                e.propagate()
                return

            try:
                letter, positions = parse_feedback(raw, pattern=e.pattern, used=e.used)
            except InvalidGuessInput as err:
                self.write(str(err))
                self.write(HELPTEXT)
                continue

            e.apply_guess(letter, positions)
            if positions:
                where = ", ".join(str(p + 1) for p in positions)
                self.write(f"Letter {letter} is at position(s) {where} of the word")
            else:
                self.write(f"Letter {letter} is not in the word")

            for cell, forced in e.propagate():
                self.write(f"Letter {forced} must be at position {cell + 1}")
            return

    def play(self) -> str:
        """
        Run turns until one candidate is left and return it.
        NoCandidatesRemaining propagates to the caller.
        """
        while True:
            solved = self.engine.solution()
            if solved is not None:
                log.info("solved: %s after %d guesses", solved, len(self.engine.history))
                return solved

            self.print_stats()
            self.write("")
            self.show_scores_or_guesses()
            self.write("")

            self.step()

