"""
Candidate filtering given the current partial knowledge.

Given:
  - a pool of words (the session's current candidates)
  - the guess pattern: one cell per position, None or a placed letter
  - the set of letters known to be absent

Return:
  - words that agree with every placed letter and contain no excluded letter
  - for each still-unknown cell, the letters seen there across the survivors

This is the core step that turns feedback into a shrinking candidate set.
The per-cell potentials feed forced-letter inference (`certain_letters`).
"""

from typing import AbstractSet, Iterable, List, Optional, Sequence, Set, Tuple

# One cell per position of the target word; None means "not known yet".
Pattern = Sequence[Optional[str]]


def is_consistent(word: str, pattern: Pattern, excluded: AbstractSet[str]) -> bool:
    """
    True iff `word` matches every placed cell of `pattern` and holds no
    excluded letter anywhere (excluded letters are forbidden in every cell,
    not just the unknown ones).
    """
    if len(word) != len(pattern):
        return False
    for ch, placed in zip(word, pattern):
        if ch in excluded:
            return False
        if placed is not None and placed != ch:
            return False
    return True


def prune_candidates(
        words: Iterable[str],
        pattern: Pattern,
        excluded: AbstractSet[str],
) -> Tuple[List[str], List[Set[str]]]:
    """
    Single pass over `words` keeping the consistent ones.

    Returns:
      (kept, potentials)
        kept       : consistent words, order preserved as in `words`
        potentials : one set per cell; for unknown cells, the letters that
                     occur there across `kept`; placed cells get an empty set
    """
    kept: List[str] = []
    potentials: List[Set[str]] = [set() for _ in pattern]
    unknown = [i for i, cell in enumerate(pattern) if cell is None]

    for w in words:
        if not is_consistent(w, pattern, excluded):
            continue
        kept.append(w)
        # Only survivors contribute; a word rejected at a later cell
        # must not leak letters into earlier cells.
        for i in unknown:
            potentials[i].add(w[i])

    return kept, potentials


def certain_letters(pattern: Pattern, potentials: Sequence[AbstractSet[str]]) -> List[Tuple[int, str]]:
    """
    Cells that are unknown in `pattern` but admit exactly one letter.

    Returns (cell, letter) pairs in cell order. A cell with no potentials at
    all (empty candidate set) is never forced.
    """
    forced: List[Tuple[int, str]] = []
    for i, (cell, options) in enumerate(zip(pattern, potentials)):
        if cell is None and len(options) == 1:
            (letter,) = options
            forced.append((i, letter))
    return forced
