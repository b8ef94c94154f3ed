from .feedback import (
    ALL_CORRECT, WORD_LENGTH, Feedback, Pattern,
    parse_pattern, pattern_from_str, pattern_to_str,
)
from .scoring import compute_feedback
from .constraints import (
    filter_candidates, filter_history, is_consistent,
    letter_accounted_elsewhere, letter_bounds,
)
from .ranking import ScoringConfig, has_repeated_letters, rank_words, suggest, word_score
from .search import find_matching
from .store import CandidateStore
from .validation import is_word, normalize_word
from .errors import (
    WordleKitError, SourceUnavailable, InvalidWordLength,
    InvalidFeedbackEncoding, NoCandidatesRemain,
)

__all__ = [
    "ALL_CORRECT", "WORD_LENGTH", "Feedback", "Pattern",
    "parse_pattern", "pattern_from_str", "pattern_to_str",
    "compute_feedback",
    "filter_candidates", "filter_history", "is_consistent",
    "letter_accounted_elsewhere", "letter_bounds",
    "ScoringConfig", "has_repeated_letters", "rank_words", "suggest", "word_score",
    "find_matching", "CandidateStore",
    "is_word", "normalize_word",
    "WordleKitError", "SourceUnavailable", "InvalidWordLength",
    "InvalidFeedbackEncoding", "NoCandidatesRemain",
]
