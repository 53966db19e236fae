from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

import requests

log = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = "./words.txt"
DEFAULT_WORD_SOURCE = "https://www.mit.edu/~ecprice/wordlist.10000"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def fetch_words(url: str = DEFAULT_WORD_SOURCE, timeout: float = 30) -> List[str]:
    """Download a newline-separated word list."""
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return r.text.splitlines()


def _normalize(lines: Iterable[str]) -> List[str]:
    return [w.strip().lower() for w in lines if w.strip()]


def load_words(path: Path | str = DEFAULT_WORDS_FILE, source_url: str = DEFAULT_WORD_SOURCE) -> List[str]:
    """
    Load the dictionary from `path`, downloading it from `source_url` and
    caching it at `path` first if the file doesn't exist yet.

    Words are stripped and lowercased; blank lines are dropped. Network and
    file errors propagate.
    """
    p = Path(path)
    if p.exists():
        log.info("Loading words from %s", p)
        return _normalize(read_lines(p))

    log.info("Downloading words from %s and saving to %s", source_url, p)
    words = _normalize(fetch_words(source_url))
    write_lines(words, p)
    return words
