"""
Dictionary validator.

What this module does:
- Check a word list file against the dictionary format (lowercase a–z, one
  word per line).
- Count invalid lines, duplicates, and the words usable for length L.
- Compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from hangman.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib


@dataclass
class ValidationReport:
    """Validation result for one dictionary file."""
    path: str             # file path (as given)
    exists: bool          # did the file exist on disk?
    L: Optional[int]      # word length of interest (None = all lengths)
    count: int            # number of VALID words
    unique_count: int     # unique valid words
    length_count: int     # unique valid words of length L (all if L is None)
    invalid_lines: int    # lines that aren't a lowercase a–z word
    sha256: str           # SHA-256 of raw file bytes (empty string if missing)
    lengths: Dict[int, int]  # unique valid words per length
    passed: bool
    issues: List[str]     # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w.isascii() and w.isalpha() and w.islower():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(L: Optional[int], path: str) -> Dict:
    """
    Validate a dictionary file, optionally focusing on length L.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` requires the file to exist and hold at least one usable
        word of length L; invalid lines and duplicates are reported as
        issues but don't fail validation (the engine skips them).
    """
    p = Path(path)
    if not p.exists():
        rep = ValidationReport(path, False, L, 0, 0, 0, 0, "", {}, False,
                               [f"words file not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = set(words)
    lengths = dict(sorted(Counter(len(w) for w in unique).items()))
    length_count = len(unique) if L is None else lengths.get(L, 0)

    issues: List[str] = []
    if invalid:
        issues.append(f"{invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append(f"{len(words) - len(unique)} duplicate line(s)")
    if length_count == 0:
        issues.append("no usable words" if L is None else f"no {L}-letter words")

    rep = ValidationReport(
        path=str(p),
        exists=True,
        L=L,
        count=len(words),
        unique_count=len(unique),
        length_count=length_count,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        lengths=lengths,
        passed=length_count > 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=10000 (uniq=10000, invalid=0, sha=abc123...) | L=5: 1368 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    L = report["L"]
    scope = "all lengths" if L is None else f"L={L}"
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| {scope}: {report['length_count']} | {status}"
    )
