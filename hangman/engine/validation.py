"""
Guess feedback validation.

This module answers the question: "Is this feedback acceptable right now?"
Feedback is (letter, positions) and is valid iff:
  - the letter is a single lowercase a–z character
  - the letter has not been used yet
  - every position is a 0-based index < L
  - every position refers to a cell that is still unknown

Human input uses the textual form `<letter> [i1 i2 ...]` with 1-based
indices as displayed; `parse_feedback` converts it to the 0-based form and
runs the same checks. The literal `undo` is handled by the caller.
"""

import re
from typing import AbstractSet, Iterable, List, Optional, Sequence, Tuple

from .errors import InvalidGuessInput

UNDO_TOKEN = "undo"

_FEEDBACK_RE = re.compile(r"^([a-z])((?:\s+[0-9]+)*)$")

Feedback = Tuple[str, List[int]]


def check_feedback(
        letter: str,
        positions: Iterable[int],
        *,
        pattern: Sequence[Optional[str]],
        used: AbstractSet[str],
) -> Feedback:
    """
    Validate 0-based feedback against the current state.

    Returns:
      (letter, sorted distinct positions)

    Raises:
      InvalidGuessInput with a message fit for showing to the user.
    """
    if not isinstance(letter, str) or len(letter) != 1 or not ("a" <= letter <= "z"):
        raise InvalidGuessInput(f"Letter must be a single character a-z, got {letter!r}")
    if letter in used:
        raise InvalidGuessInput(f"{letter} has already been guessed")

    L = len(pattern)
    cells = sorted(set(positions))
    for p in cells:
        if not 0 <= p < L:
            raise InvalidGuessInput(f"Position {p + 1} is not a valid letter index (1-{L})")
        if pattern[p] is not None:
            raise InvalidGuessInput(f"Letter {p + 1} is already occupied by {pattern[p]}")
    return letter, cells


def parse_feedback(
        text: str,
        *,
        pattern: Sequence[Optional[str]],
        used: AbstractSet[str],
) -> Feedback:
    """
    Parse one line of human input (1-based positions) into 0-based feedback.

    Examples (L=5, nothing used yet):
      "n 1"   -> ("n", [0])
      "e 2 4" -> ("e", [1, 3])
      "g"     -> ("g", [])
    """
    m = _FEEDBACK_RE.match(text.strip().lower())
    if m is None:
        raise InvalidGuessInput(f"Invalid guess format: {text.strip()!r}")

    letter = m.group(1)
    raw = [int(tok) for tok in m.group(2).split()]

    # 0 would map to -1 and silently address the last cell
    if any(p == 0 for p in raw):
        raise InvalidGuessInput(f"Positions start at 1 (valid range 1-{len(pattern)})")

    return check_feedback(letter, (p - 1 for p in raw), pattern=pattern, used=used)


def is_undo(text: str) -> bool:
    return text.strip().lower() == UNDO_TOKEN
