import pytest
from hangman.engine import (
    HangmanEngine, rank_letters, feedback, prune_candidates, certain_letters,
    parse_feedback, InvalidConfiguration, InvalidGuessInput, NothingToUndo,
    NoCandidatesRemaining,
)

WORDS = ["bat", "cat", "car", "can"]


# --- feedback / scoring ---
@pytest.mark.parametrize("letter,target,expected", [
    ("e", "level", [1, 3]),
    ("l", "level", [0, 4]),
    ("z", "level", []),
    ("a", "can", [1]),
])
def test_feedback(letter, target, expected):
    assert feedback(letter, target) == expected

def test_rank_letters_counts_each_word_once():
    scores = dict(rank_letters(["aaa", "aab"], set()))
    assert scores["a"] == 2 and scores["b"] == 1 and scores["z"] == 0

def test_rank_letters_ties_in_alphabet_order():
    ranked = rank_letters(["can", "car"], {"a"})
    assert ranked[:3] == [("c", 2), ("n", 1), ("r", 1)]
    # zero-count letters follow, still alphabetical
    assert ranked[3] == ("b", 0)
    assert "a" not in [ch for ch, _ in ranked]
    assert len(ranked) == 25


# --- constraints ---
def test_prune_candidates_excluded_anywhere():
    kept, pots = prune_candidates(WORDS, [None, "a", None], {"t"})
    assert kept == ["car", "can"]
    assert pots == [{"c"}, set(), {"r", "n"}]

def test_prune_potentials_only_from_survivors():
    # "cbz" passes cell 0 but is rejected at cell 2; its 'c' must not count
    kept, pots = prune_candidates(["abc", "cbz"], [None, None, None], {"z"})
    assert kept == ["abc"]
    assert pots == [{"a"}, {"b"}, {"c"}]

def test_certain_letters_skips_placed_and_empty():
    pattern = [None, "a", None, None]
    pots = [{"c"}, set(), {"n", "r"}, set()]
    assert certain_letters(pattern, pots) == [(0, "c")]


# --- validation ---
@pytest.mark.parametrize("text,expected", [
    ("n 1", ("n", [0])),
    ("e 2 4", ("e", [1, 3])),
    ("E  4 2", ("e", [1, 3])),
    ("g", ("g", [])),
    ("e 2 2", ("e", [1])),
])
def test_parse_feedback_ok(text, expected):
    assert parse_feedback(text, pattern=[None] * 5, used=set()) == expected

@pytest.mark.parametrize("text", ["", "ab 1", "1", "e x", "e 0", "e 6", "e 1 9"])
def test_parse_feedback_rejects_bad_input(text):
    with pytest.raises(InvalidGuessInput):
        parse_feedback(text, pattern=[None] * 5, used=set())

def test_parse_feedback_rejects_used_and_occupied():
    with pytest.raises(InvalidGuessInput, match="already been guessed"):
        parse_feedback("a 1", pattern=[None, None], used={"a"})
    with pytest.raises(InvalidGuessInput, match="already occupied"):
        parse_feedback("b 1", pattern=["a", None], used={"a"})


# --- engine ---
def test_engine_init_filters_and_dedupes():
    e = HangmanEngine(["Bat", "bat", "cart", "can", "c-t", ""], 3)
    assert e.candidates == ["bat", "can"]
    assert e.render() == "_ _ _"

@pytest.mark.parametrize("words,L", [(WORDS, 0), (WORDS, -1), (WORDS, 7), ([], 3)])
def test_engine_invalid_configuration(words, L):
    with pytest.raises(InvalidConfiguration):
        HangmanEngine(words, L)

def test_end_to_end_example():
    e = HangmanEngine(WORDS, 3)

    e.apply_guess("a", {1})
    assert e.pattern == [None, "a", None]
    assert e.propagate() == []
    assert e.candidates == ["bat", "cat", "car", "can"]
    assert e.solution() is None

    e.apply_guess("t", set())
    assert e.excluded == ["t"]
    assert e.propagate() == [(0, "c")]
    assert e.candidates == ["car", "can"]
    assert e.pattern == ["c", "a", None]
    assert "c" in e.used

    e.apply_guess("n", [2])
    e.propagate()
    assert e.solution() == "can"

def test_exhaustion_example():
    e = HangmanEngine(WORDS, 3)
    e.apply_guess("z", [0])
    e.propagate()
    assert e.candidates == []
    with pytest.raises(NoCandidatesRemaining):
        e.solution()

def test_apply_guess_does_not_prune():
    e = HangmanEngine(WORDS, 3)
    e.apply_guess("t", [])
    assert len(e.candidates) == 4
    e.prune()
    assert e.candidates == ["car", "can"]

def test_apply_guess_rejects_bad_feedback_without_side_effects():
    e = HangmanEngine(WORDS, 3)
    e.apply_guess("a", [1])
    for letter, positions in [("a", []), ("c", [1]), ("c", [3]), ("cc", [])]:
        with pytest.raises(InvalidGuessInput):
            e.apply_guess(letter, positions)
    assert len(e.history) == 1
    assert e.used == {"a"}

def test_compute_scores_skips_used_letters():
    e = HangmanEngine(WORDS, 3)
    e.apply_guess("a", [1])
    e.propagate()
    ranked = e.compute_scores()
    assert ranked[0] == ("c", 3)
    assert "a" not in dict(ranked)
    assert ranked == e.compute_scores()

def test_undo_empty_history():
    e = HangmanEngine(WORDS, 3)
    with pytest.raises(NothingToUndo):
        e.undo()

def test_undo_restores_state_and_resets_candidates():
    e = HangmanEngine(WORDS, 3)
    e.apply_guess("a", [1])
    e.propagate()
    before = (list(e.pattern), list(e.excluded), set(e.used))

    e.apply_guess("t", [])
    e.propagate()
    assert e.pattern[0] == "c"

    assert e.undo() == ("t", [])
    assert (e.pattern, e.excluded, e.used) == before
    assert e.candidates == list(e.original)

    e.propagate()
    assert e.candidates == ["bat", "cat", "car", "can"]
    # the letter is free to be guessed again
    e.apply_guess("t", [2])
    e.propagate()
    assert e.candidates == ["bat", "cat"]

def test_guesses_history_for_reporting():
    e = HangmanEngine(WORDS, 3)
    e.apply_guess("a", {1})
    e.apply_guess("t", [])
    assert e.guesses() == [("a", [1]), ("t", [])]
