from .state import HangmanEngine, HistoryFrame
from .constraints import prune_candidates, certain_letters
from .scoring import rank_letters, feedback, ALPHABET
from .validation import parse_feedback, check_feedback, is_undo
from .errors import (
    HangmanError,
    InvalidConfiguration,
    InvalidGuessInput,
    NothingToUndo,
    NoCandidatesRemaining,
    SimulationDivergence,
    SimulationTimeout,
)

__all__ = [
    "HangmanEngine", "HistoryFrame",
    "prune_candidates", "certain_letters",
    "rank_letters", "feedback", "ALPHABET",
    "parse_feedback", "check_feedback", "is_undo",
    "HangmanError", "InvalidConfiguration", "InvalidGuessInput", "NothingToUndo",
    "NoCandidatesRemaining", "SimulationDivergence", "SimulationTimeout",
]
