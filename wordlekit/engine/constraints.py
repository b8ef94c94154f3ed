"""
Candidate filtering given feedback.

Given:
  - a pool of candidate words
  - a guess and the feedback pattern it received

Return:
  - the words that could still be the hidden answer.

The predicate reasons only from (guess, pattern, candidate); it never needs
the real answer, so it works on feedback typed in from a live puzzle.

Duplicate letters are the tricky part. A gray mark on a letter that is also
green/yellow elsewhere in the same guess does not mean "letter absent"; it
means "no copies beyond the ones already marked". letter_accounted_elsewhere()
and letter_bounds() carry that logic.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .feedback import Feedback, Pattern

log = logging.getLogger(__name__)

# Sequence of (guess, pattern) pairs seen so far
History = Iterable[Tuple[str, Pattern]]

_HIT = (Feedback.CORRECT, Feedback.MISPLACED)


def letter_accounted_elsewhere(guess: str, pattern: Sequence[Feedback], i: int) -> bool:
    """
    True if guess[i]'s letter is marked green or yellow at some other
    position of the same guess.

    When this holds, a gray mark at i must not rule the letter out entirely.
    """
    letter = guess[i]
    for j, fb in enumerate(pattern):
        if j != i and guess[j] == letter and fb in _HIT:
            return True
    return False


def letter_bounds(guess: str, pattern: Sequence[Feedback]) -> Dict[str, Tuple[int, Optional[int]]]:
    """
    Per-letter (min, max) copy counts the answer must have.

    min = number of green/yellow marks for the letter.
    max = min when the letter also got a gray mark (the answer ran out of
          copies), otherwise None (unbounded).

    Example:
      letter_bounds("spree", pattern_from_str("Y-YYG"))
        -> {'s': (1, None), 'p': (0, 0),
            'r': (1, None), 'e': (2, None)}
    """
    hits: Counter = Counter()
    capped = set()
    for ch, fb in zip(guess, pattern):
        if fb in _HIT:
            hits[ch] += 1
        else:
            capped.add(ch)

    bounds: Dict[str, Tuple[int, Optional[int]]] = {}
    for ch in dict.fromkeys(guess):
        lo = hits[ch]
        bounds[ch] = (lo, lo if ch in capped else None)
    return bounds


def is_consistent(candidate: str, guess: str, pattern: Sequence[Feedback]) -> bool:
    """
    Could `candidate` be the answer, given that `guess` produced `pattern`?
    """
    for i, fb in enumerate(pattern):
        g = guess[i]
        if fb is Feedback.CORRECT:
            if candidate[i] != g:
                return False
        elif fb is Feedback.MISPLACED:
            # Same slot would have been green
            if candidate[i] == g or g not in candidate:
                return False
        else:
            if candidate[i] == g:
                return False
            if not letter_accounted_elsewhere(guess, pattern, i) and g in candidate:
                return False

    # Repeated letters: the answer holds exactly as many copies as were
    # marked when any copy went gray, and at least as many otherwise.
    counts = Counter(candidate)
    for ch, (lo, hi) in letter_bounds(guess, pattern).items():
        if counts[ch] < lo:
            return False
        if hi is not None and counts[ch] > hi:
            return False
    return True


def filter_candidates(words: Iterable[str], guess: str, pattern: Sequence[Feedback]) -> List[str]:
    """
    Keep the words consistent with one (guess, pattern) observation.

    Returns a new list (order preserved as in `words`); the input is not
    modified. An empty result is a valid outcome.
    """
    out = [w for w in words if is_consistent(w, guess, pattern)]
    log.debug("filter %s: %d candidates remain", guess, len(out))
    return out


def filter_history(words: Iterable[str], history: History) -> List[str]:
    """
    Keep the words consistent with every (guess, pattern) in `history`.
    """
    out = list(words)
    for guess, patt in history:
        out = filter_candidates(out, guess, patt)
        if not out:
            break
    return out
