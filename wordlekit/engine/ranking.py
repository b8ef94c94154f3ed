"""
Letter-rank scoring: how good a word looks as the next guess.

  - Every letter has a weight from a fixed English frequency ranking
    (e, t, a, o, ... most common first): weight = rank_base - rank.
  - A word scores the sum of its DISTINCT letters' weights, plus a flat
    bonus when no letter repeats.
  - suggest() picks the highest score; ties go to the word seen first, so
    suggestions are stable for a given word order.

The ranking never changes, so a word's score is a pure function of the word.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

ENGLISH_FREQUENCY_ORDER = "etaoinshrdlcumwfgypbvkjxqz"


@dataclass(frozen=True)
class ScoringConfig:
    """Tunable heuristic constants."""
    frequency_order: str = ENGLISH_FREQUENCY_ORDER
    rank_base: float = 26.0
    distinct_bonus: float = 10.0

    def letter_weights(self) -> Dict[str, float]:
        return {ch: self.rank_base - pos for pos, ch in enumerate(self.frequency_order)}


DEFAULT_CONFIG = ScoringConfig()


def has_repeated_letters(word: str) -> bool:
    """Case-insensitive; characters outside a-z are not tracked."""
    seen = [False] * 26
    for ch in word.lower():
        idx = ord(ch) - ord("a")
        if not 0 <= idx < 26:
            continue
        if seen[idx]:
            return True
        seen[idx] = True
    return False


def word_score(word: str, config: Optional[ScoringConfig] = None) -> float:
    """
    Sum of rank weights over distinct letters, plus the no-repeat bonus.

    Letters missing from the ranking add nothing.
    """
    config = config or DEFAULT_CONFIG
    weights = config.letter_weights()
    s = sum(weights.get(ch, 0.0) for ch in set(word.lower()))
    if not has_repeated_letters(word):
        s += config.distinct_bonus
    return s


def suggest(words: Sequence[str], config: Optional[ScoringConfig] = None) -> Optional[str]:
    """
    Best-scoring word, or None for an empty pool.

    Only a strictly greater score replaces the current best, so the first
    of several tied words wins.
    """
    if not words:
        return None
    if len(words) == 1:
        return words[0]

    best_word = None
    best_score = None
    for w in words:
        s = word_score(w, config)
        if best_score is None or s > best_score:
            best_score = s
            best_word = w
    return best_word


def rank_words(words: Iterable[str], config: Optional[ScoringConfig] = None) -> List[Tuple[str, float]]:
    """(word, score) pairs, best first; ties keep input order."""
    scored = [(w, word_score(w, config)) for w in words]
    scored.sort(key=lambda ws: ws[1], reverse=True)
    return scored
