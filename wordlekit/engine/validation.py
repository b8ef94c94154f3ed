"""
Word validation.

A word is acceptable iff, after trimming and case-folding, it is exactly
WORD_LENGTH ASCII letters a–z. Guesses typed into the toolkit and target
words for the art tool both go through normalize_word(); the word list
loader uses is_word() to silently skip bad lines instead.
"""

from .errors import InvalidWordLength
from .feedback import WORD_LENGTH


def is_word(text: str, N: int = WORD_LENGTH) -> bool:
    """True if `text` trims to exactly N ASCII letters."""
    w = text.strip()
    return len(w) == N and w.isascii() and w.isalpha()


def normalize_word(text: str, N: int = WORD_LENGTH) -> str:
    """
    Return the lowercase form of `text`, or raise InvalidWordLength.
    """
    if not isinstance(text, str) or not is_word(text, N):
        raise InvalidWordLength(str(text), N)
    return text.strip().lower()
