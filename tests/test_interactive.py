import pytest
from hangman.engine import HangmanEngine, InvalidConfiguration, NoCandidatesRemaining
from hangman.harness import InteractiveSession, SessionConfig
from hangman.harness.interactive import HELPTEXT

WORDS = ["bat", "cat", "car", "can"]


def _session(lines, config=None):
    it = iter(lines)
    out = []
    session = InteractiveSession(
        HangmanEngine(WORDS, 3), config,
        read_line=lambda prompt: next(it), write=out.append,
    )
    return session, out


def test_play_end_to_end():
    session, out = _session(["a 2", "t", "n 3"])
    assert session.play() == "can"
    assert "Letter t is not in the word" in out
    assert "Letter c must be at position 1" in out
    assert "letters not present: t" in out

def test_play_shows_top_letters_above_threshold():
    session, out = _session(["a 2", "t", "n 3"], SessionConfig(num_suggestions=2, display_threshold=1))
    session.play()
    assert "Top 2 guesses:" in out
    assert "1. a: 4" in out and "2. c: 3" in out

def test_play_lists_candidates_below_threshold():
    session, out = _session(["a 2", "t", "n 3"])
    session.play()
    assert "Possibilities:" in out and "bat" in out

def test_bad_input_is_reported_and_reprompted():
    session, out = _session(["", "a 9", "a 2", "a 1", "t", "n 3"])
    assert session.play() == "can"
    assert HELPTEXT in out
    assert any("not a valid letter index" in line for line in out)
    assert "a has already been guessed" in out

def test_undo_then_continue():
    session, out = _session(["undo", "a 2", "t", "undo", "b 1", "t 3"])
    assert session.play() == "bat"
    assert "Nothing to undo" in out
    assert "Undid guess t" in out
    assert session.engine.excluded == []

def test_contradiction_propagates():
    session, _ = _session(["z 1"])
    with pytest.raises(NoCandidatesRemaining):
        session.play()

@pytest.mark.parametrize("kwargs", [{"num_suggestions": 0}, {"display_threshold": 0}])
def test_session_config_validation(kwargs):
    with pytest.raises(InvalidConfiguration):
        SessionConfig(**kwargs)
