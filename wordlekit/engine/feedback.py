"""
Feedback model.

Conventions (same letters the scorer emits):
  - 'G'  : green  = correct letter in the correct position
  - 'Y'  : yellow = correct letter in the wrong position
  - '-'  : gray   = letter not present (or present fewer times than guessed)

Users type feedback with g / y / b (or r for "grey") in either case; that
input encoding is parsed here into a Pattern.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Sequence, Tuple

from .errors import InvalidFeedbackEncoding

WORD_LENGTH = 5


class Feedback(str, Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    ABSENT = "-"


# A pattern is positionally aligned with the guess it describes.
Pattern = Tuple[Feedback, ...]

ALL_CORRECT: Pattern = (Feedback.CORRECT,) * WORD_LENGTH

# User input alphabet -> symbol
_INPUT_CODES: Dict[str, Feedback] = {
    "g": Feedback.CORRECT,
    "y": Feedback.MISPLACED,
    "b": Feedback.ABSENT,
    "r": Feedback.ABSENT,
}


def parse_pattern(text: str) -> Pattern:
    """
    Parse a 5-character feedback code such as "gYbbR".

    Raises InvalidFeedbackEncoding on a wrong length or an unknown character.
    """
    code = text.strip()
    if len(code) != WORD_LENGTH:
        raise InvalidFeedbackEncoding(
            text, f"expected {WORD_LENGTH} characters, got {len(code)}")
    out = []
    for ch in code:
        try:
            out.append(_INPUT_CODES[ch.lower()])
        except KeyError:
            raise InvalidFeedbackEncoding(text, f"unknown symbol {ch!r}") from None
    return tuple(out)


def pattern_to_str(pattern: Sequence[Feedback]) -> str:
    """Canonical rendering, e.g. (CORRECT, ABSENT, ...) -> "G-..."."""
    return "".join(f.value for f in pattern)


def pattern_from_str(text: str) -> Pattern:
    """Inverse of pattern_to_str (accepts only 'G', 'Y', '-')."""
    try:
        return tuple(Feedback(ch) for ch in text)
    except ValueError:
        raise InvalidFeedbackEncoding(text, "expected only 'G', 'Y' or '-'") from None
