"""
Feedback computation for a single (guess, answer) pair.

Algorithm (two-pass, canonical for Wordle):
  1) First pass marks all greens and consumes those answer positions.
  2) Second pass walks the remaining guess letters left to right; each one
     takes the leftmost unconsumed answer position holding the same letter
     (yellow), or stays gray when none is left.

Consuming answer positions caps yellows by the true multiplicity of the
letter in the answer:

    compute_feedback("speed", "abide") -> "--Y-Y"   (only one 'e' to give away)
    compute_feedback("spree", "erase") -> "Y-YYG"
"""

from __future__ import annotations

from typing import List

from .feedback import Feedback, Pattern


def compute_feedback(guess: str, answer: str) -> Pattern:
    """
    Compute the feedback `guess` receives when `answer` is the hidden word.

    Preconditions:
      - both words are normalized (lowercase) and of equal length

    Pure function of its two inputs.
    """
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    n = len(guess)
    pattern: List[Feedback] = [Feedback.ABSENT] * n
    used = [False] * n

    # Pass 1: exact matches
    for i in range(n):
        if guess[i] == answer[i]:
            pattern[i] = Feedback.CORRECT
            used[i] = True

    # Pass 2: displaced matches against unconsumed answer positions
    for i in range(n):
        if pattern[i] is Feedback.CORRECT:
            continue
        for j in range(n):
            if not used[j] and answer[j] == guess[i]:
                pattern[i] = Feedback.MISPLACED
                used[j] = True
                break

    return tuple(pattern)
