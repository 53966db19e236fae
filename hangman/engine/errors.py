"""
Error kinds raised by the engine and the drivers.

Recoverable (report and keep going):
  - InvalidGuessInput : malformed feedback, bad index, re-guessed letter
  - NothingToUndo     : undo requested with an empty history

Fatal:
  - InvalidConfiguration  : session cannot start
  - NoCandidatesRemaining : dictionary gap or contradictory feedback
  - SimulationDivergence  : one simulated word went wrong (batch continues)
  - SimulationTimeout     : one simulated word ran past its deadline
"""


class HangmanError(Exception):
    """Base class for everything this package raises on purpose."""


class InvalidConfiguration(HangmanError, ValueError):
    pass


class InvalidGuessInput(HangmanError, ValueError):
    pass


class NothingToUndo(HangmanError):
    pass


class NoCandidatesRemaining(HangmanError):
    pass


class SimulationDivergence(HangmanError):
    pass


class SimulationTimeout(HangmanError):
    pass
