import pytest
from wordlekit.engine import (
    ALL_CORRECT, CandidateStore, Feedback, InvalidFeedbackEncoding, InvalidWordLength,
    NoCandidatesRemain, pattern_from_str,
)

A = Feedback.ABSENT


def test_store_dedupes_and_keeps_order():
    store = CandidateStore(["crane", "stare", "crane", "raise"])
    assert store.words == ("crane", "stare", "raise")
    assert len(store) == 3
    assert "stare" in store and "slate" not in store


def test_narrow_replaces_with_subset_and_records_history():
    store = CandidateStore(["crane", "raise", "stare", "trace", "scoop"])
    snapshot = store.words
    n = store.narrow("raise", pattern_from_str("YY--G"))
    assert n == len(store) == 2
    assert store.words == ("crane", "trace")
    # earlier snapshot untouched
    assert snapshot == ("crane", "raise", "stare", "trace", "scoop")
    assert store.history == [("raise", pattern_from_str("YY--G"))]


def test_narrow_to_empty_then_suggest_none():
    store = CandidateStore(["apple", "grape"])
    assert store.narrow("apple", (A,) * 5) == 0
    assert store.exhausted
    assert store.suggest() is None


def test_narrow_strict_leaves_store_untouched():
    store = CandidateStore(["apple", "grape"])
    with pytest.raises(NoCandidatesRemain):
        store.narrow("apple", (A,) * 5, strict=True)
    assert store.words == ("apple", "grape")
    assert store.history == []


def test_preview():
    store = CandidateStore([f"word{c}" for c in "abcdefghijkl"])
    head, rest = store.preview(10)
    assert len(head) == 10 and rest == 2
    head, rest = CandidateStore(["crane"]).preview(10)
    assert head == ("crane",) and rest == 0


def test_suggest_single_member():
    assert CandidateStore(["mamma"]).suggest() == "mamma"


@pytest.mark.parametrize("guess", ["cran", "cranes", "cr4ne", ""])
def test_narrow_rejects_malformed_guess(guess):
    store = CandidateStore(["crane", "raise"])
    with pytest.raises(InvalidWordLength):
        store.narrow(guess, ALL_CORRECT)
    assert store.words == ("crane", "raise")
    assert store.history == []


def test_narrow_rejects_short_pattern():
    store = CandidateStore(["crane", "raise"])
    with pytest.raises(InvalidFeedbackEncoding):
        store.narrow("crane", pattern_from_str("GGGG"))
    assert store.words == ("crane", "raise")
    assert store.history == []


def test_narrow_folds_guess_case():
    store = CandidateStore(["crane", "raise"])
    assert store.narrow("CRANE", ALL_CORRECT) == 1
    assert store.words == ("crane",)
    assert store.history == [("crane", ALL_CORRECT)]


def test_suggest_matches_ranking():
    from wordlekit.engine.ranking import ScoringConfig, suggest
    words = ["speed", "geese", "crane", "stare"]
    cfg = ScoringConfig(distinct_bonus=0.0)
    store = CandidateStore(words)
    assert store.suggest() == suggest(words)
    assert store.suggest(cfg) == suggest(words, cfg)
