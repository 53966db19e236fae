"""
Letter-frequency scoring and feedback for a single (letter, target) pair.

Scoring convention:
  - a letter's score is the number of candidate words containing it at
    least once (repeats inside one word count once)
  - letters already used are skipped
  - ranking is descending by score; equal scores keep alphabet order

Counts live in a fixed 26-slot array indexed by letter, so "skip used
letters" is a simple mask over that array.

Feedback convention (what the host of the game reports):
  - the sorted 0-based positions where the letter occurs in the target
  - an empty list means "not in the word"
"""

import string
from typing import AbstractSet, Iterable, List, Tuple

import numpy as np

ALPHABET = string.ascii_lowercase

LetterScore = Tuple[str, int]


def letter_index(ch: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(ch) - ord("a")


def letter_counts(words: Iterable[str]) -> np.ndarray:
    """
    Count, for each letter a..z, how many words contain it at least once.

    Returns:
      int64 array of shape (26,)
    """
    counts = np.zeros(len(ALPHABET), dtype=np.int64)
    for w in words:
        # set() caps each word's contribution at 1 per letter
        idx = [letter_index(ch) for ch in set(w)]
        counts[idx] += 1
    return counts


def rank_letters(words: Iterable[str], used: AbstractSet[str]) -> List[LetterScore]:
    """
    Rank the unused letters by how many `words` contain them.

    Examples:
      rank_letters(["can", "car"], {"a"}) -> [("c", 2), ("n", 1), ("r", 1), ("b", 0), ...]
    """
    counts = letter_counts(words)
    available = np.array([ch not in used for ch in ALPHABET])

    # Stable sort on the negated counts keeps alphabet order within ties.
    order = np.argsort(-counts, kind="stable")
    return [(ALPHABET[i], int(counts[i])) for i in order if available[i]]


def feedback(letter: str, target: str) -> List[int]:
    """
    Positions (0-based) of `letter` in `target`.

    Examples:
      feedback("e", "level") -> [1, 3]
      feedback("z", "level") -> []
    """
    return [i for i, ch in enumerate(target) if ch == letter]
