"""
Candidate store: the live set of words still consistent with every piece
of feedback received in a session.

The held words are an immutable tuple. Each narrow() builds a fresh tuple
from the old one and swaps it in, so the set never grows and a snapshot
taken earlier (store.words) is never modified behind the caller's back.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .constraints import filter_candidates
from .errors import InvalidFeedbackEncoding, NoCandidatesRemain
from .feedback import WORD_LENGTH, Feedback, Pattern, pattern_to_str
from .ranking import ScoringConfig, suggest
from .validation import normalize_word

log = logging.getLogger(__name__)


class CandidateStore:

    def __init__(self, words: Iterable[str]):
        # dict keeps first-seen order while dropping duplicates
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(words))
        self.history: List[Tuple[str, Pattern]] = []

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def exhausted(self) -> bool:
        """True once feedback has filtered every word out."""
        return not self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def narrow(self, guess: str, pattern: Sequence[Feedback], *, strict: bool = False) -> int:
        """
        Replace the held words with those consistent with (guess, pattern).

        Returns the new size. With strict=True an empty result raises
        NoCandidatesRemain and the store keeps its previous words.

        A malformed guess raises InvalidWordLength, and a pattern of the
        wrong length InvalidFeedbackEncoding; both before anything changes.
        """
        guess = normalize_word(guess)
        patt = tuple(pattern)
        if len(patt) != WORD_LENGTH:
            raise InvalidFeedbackEncoding(
                pattern_to_str(patt), f"expected {WORD_LENGTH} symbols, got {len(patt)}")
        kept = tuple(filter_candidates(self._words, guess, patt))
        if not kept and strict:
            raise NoCandidatesRemain(
                f"no candidates consistent with {guess} "
                f"({len(self._words)} before filtering)")
        log.debug("narrow %s: %d -> %d", guess, len(self._words), len(kept))
        self._words = kept
        self.history.append((guess, patt))
        return len(kept)

    def suggest(self, config: Optional[ScoringConfig] = None) -> Optional[str]:
        """Best next guess by the letter-rank heuristic, or None when empty."""
        return suggest(self._words, config)

    def preview(self, limit: int = 10) -> Tuple[Tuple[str, ...], int]:
        """First `limit` words plus how many more are not shown."""
        head = self._words[:limit]
        return head, len(self._words) - len(head)
