# apps/cli/play.py
"""
CLI entry point for an interactive Hangman game.

This script:
  1) Loads the dictionary (downloading and caching it on first use).
  2) Builds a solver engine for the requested word length.
  3) Asks for the result of each guess until one word is left.

Usage:
    python -m apps.cli.play 5
    python -m apps.cli.play 7 -n 8 -d 20 --words-file data/words.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from hangman.datasets import load_words, DEFAULT_WORDS_FILE, DEFAULT_WORD_SOURCE
from hangman.engine import HangmanEngine, HangmanError
from hangman.harness import InteractiveSession, SessionConfig


def _positive_int(text: str) -> int:
    v = int(text)
    if v < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {v}")
    return v


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="hangman-solver: interactive letter suggestions")
    ap.add_argument("letters", type=_positive_int, help="number of letters in the word being guessed")
    ap.add_argument("-f", "--words-file", default=DEFAULT_WORDS_FILE,
                    help="name of the file to cache words in")
    ap.add_argument("-s", "--word-source", default=DEFAULT_WORD_SOURCE,
                    help="url to fetch words from if not cached")
    ap.add_argument("-n", "--num-suggestions", type=_positive_int, default=5,
                    help="number of top letter suggestions to display")
    ap.add_argument("-d", "--display-guesses-threshold", type=_positive_int, default=10,
                    help="show possible words once the number left drops to this threshold")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        words = load_words(args.words_file, args.word_source)
        print(f"Loaded {len(words)} words")

        engine = HangmanEngine(words, args.letters)
        config = SessionConfig(num_suggestions=args.num_suggestions,
                               display_threshold=args.display_guesses_threshold)
        final = InteractiveSession(engine, config).play()
    except (HangmanError, OSError, UnicodeDecodeError) as e:
        # requests' exceptions are OSError subclasses
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned", file=sys.stderr)
        return 1

    print(f"Final guess: {final}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
