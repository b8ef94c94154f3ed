"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

A baseline for the self-play harness: any heuristic worth keeping should
beat it on average guesses.
"""

from __future__ import annotations

from typing import List

from wordlekit.engine.errors import NoCandidatesRemain
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "candidates": current consistent answer set (List[str])
                - "turn":       1-based turn number
                - "history":    (guess, pattern) pairs so far
        """
        candidates: List[str] = state["candidates"]
        if not candidates:
            raise NoCandidatesRemain("no candidates left to pick from")
        return candidates[self.rng.randrange(len(candidates))]
