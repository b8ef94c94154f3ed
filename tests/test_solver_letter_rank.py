import pytest
from wordlekit.solvers import create_solver, get_solver_ids
from wordlekit.engine.ranking import (
    ScoringConfig, has_repeated_letters, rank_words, suggest, word_score,
)
from wordlekit.harness import run_case


@pytest.mark.parametrize("word,expected", [
    ("crane", 15 + 18 + 24 + 21 + 26 + 10.0),
    ("speed", 20 + 8 + 26 + 17),          # repeated 'e' counted once, no bonus
    ("eerie", 26 + 18 + 22),
    ("fuzzy", 11 + 14 + 1 + 9),
])
def test_word_score(word, expected):
    assert word_score(word) == expected


def test_word_score_config():
    cfg = ScoringConfig(distinct_bonus=0.0)
    assert word_score("crane", cfg) == 104
    # letters missing from the ranking add nothing
    cfg = ScoringConfig(frequency_order="abc")
    assert word_score("abcde", cfg) == 26 + 25 + 24 + 10


def test_has_repeated_letters():
    assert has_repeated_letters("speed")
    assert has_repeated_letters("llama")
    assert not has_repeated_letters("crane")


def test_scoring_ignores_case_and_non_letters():
    assert has_repeated_letters("Cacao")
    assert not has_repeated_letters("CRANE")
    assert not has_repeated_letters("cr-ne")
    assert not has_repeated_letters("cr\u00e2ne")
    assert word_score("Crane") == word_score("crane")
    assert suggest(["SPEED", "Crane"]) == "Crane"


def test_suggest_empty_and_single():
    assert suggest([]) is None
    assert suggest(["speed"]) == "speed"


def test_suggest_prefers_distinct_letters():
    assert suggest(["speed", "geese", "crane"]) == "crane"


def test_suggest_tie_goes_to_first():
    assert suggest(["stare", "tears", "aster"]) == "stare"
    assert suggest(["aster", "stare", "tears"]) == "aster"


def test_rank_words_stable():
    ranked = rank_words(["tears", "speed", "stare"])
    assert [w for w, _ in ranked] == ["tears", "stare", "speed"]


def test_registry():
    assert get_solver_ids() == ["letter_rank", "random_consistent"]
    with pytest.raises(ValueError):
        create_solver("nope")


def test_letter_rank_smoke():
    words = ["crane", "raise", "stare", "trace", "cared"]
    solver = create_solver("letter_rank")
    r = run_case(solver, "cared", words=words, max_turns=6, seed=42)
    assert r["success"] is True
    assert r["history"][-1][0] == "cared"


def test_random_consistent_reset_is_repeatable():
    words = ["crane", "raise", "stare", "trace", "cared", "adieu", "alone"]
    state = {"turn": 1, "history": [], "candidates": words}
    solver = create_solver("random_consistent")
    solver.reset(seed=7)
    first = [solver.next_guess(state) for _ in range(5)]
    solver.reset(seed=7)
    assert [solver.next_guess(state) for _ in range(5)] == first
    assert not hasattr(solver, "words")
