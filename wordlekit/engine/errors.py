"""
Error kinds raised by the engine and the word list loader.

Only SourceUnavailable is fatal (it aborts startup). Everything else is a
rejected input or a reportable state; callers reprompt and keep their
previous state.
"""


class WordleKitError(Exception):
    """Base class for every wordlekit error."""


class SourceUnavailable(WordleKitError, OSError):
    """The word list could not be opened or read."""


class InvalidWordLength(WordleKitError, ValueError):
    """A guess or target word is not exactly 5 letters."""

    def __init__(self, word: str, expected: int = 5):
        self.word = word
        self.expected = expected
        super().__init__(f"word must be exactly {expected} letters: {word!r}")


class InvalidFeedbackEncoding(WordleKitError, ValueError):
    """A feedback string has the wrong length or an unknown character."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid feedback {text!r}: {reason}")


class NoCandidatesRemain(WordleKitError):
    """Filtering left nothing: the feedback is contradictory or the answer
    is outside the loaded vocabulary."""
