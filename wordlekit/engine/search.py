"""
Pattern search ("art tool").

Inverse use of the scorer: with the answer fixed, find every word whose
guess would paint the requested pattern. Handy for drawing shapes on a
Wordle grid.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .feedback import Feedback
from .scoring import compute_feedback
from .validation import normalize_word


def find_matching(words: Iterable[str], answer: str, desired: Sequence[Feedback]) -> List[str]:
    """
    Return the words w (in input order) with compute_feedback(w, answer) == desired.

    The answer is case-folded; a malformed one raises InvalidWordLength.
    """
    answer = normalize_word(answer)
    target = tuple(desired)
    return [w for w in words if compute_feedback(w, answer) == target]
