"""
Letter-Rank Solver.

Plays the engine's letter-rank suggestion (distinct-letter coverage against a
fixed English ranking, plus a bonus for words without repeats) over the
CURRENT candidate set, so every guess could still be the answer.
"""

from __future__ import annotations

from typing import List, Optional

from wordlekit.engine.errors import NoCandidatesRemain
from wordlekit.engine.ranking import DEFAULT_CONFIG, ScoringConfig, suggest
from .base import BaseSolver, register


@register
class LetterRankSolver(BaseSolver):
    id = "letter_rank"
    name = "Letter Rank (distinct + no-repeat bonus)"
    version = "1.0.0"

    def __init__(self, config: Optional[ScoringConfig] = None):
        super().__init__()
        self.config = config or DEFAULT_CONFIG

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        guess = suggest(candidates, self.config)
        if guess is None:
            raise NoCandidatesRemain("no candidates left to suggest from")
        return guess
