"""
Self-play harness.

- run_case:  play one puzzle (one hidden answer) with a given solver.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

The solver only ever sees the candidate set and the feedback history; the
hidden answer is used solely to compute feedback.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Tuple

from wordlekit.engine import ALL_CORRECT, Pattern, compute_feedback, filter_candidates

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        solver,
        answer: str,
        *,
        words: Iterable[str],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the solver wins, runs out of candidates, or the
    turn budget is exhausted.

    Args:
        solver:    a BaseSolver
        answer:    the hidden word for this case
        words:     the vocabulary (initial candidate set)
        max_turns: must be 6 (Wordle rule; enforced)
        seed:      RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), exhausted (bool)
    """
    _assert_wordle_turns(max_turns)

    vocab = list(words)
    solver.reset(seed=seed)

    history: List[Tuple[str, Pattern]] = []
    candidates = vocab
    success = False
    exhausted = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        if not candidates:
            # Answer is outside the vocabulary
            exhausted = True
            break

        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
        }
        guess = solver.next_guess(state)
        patt = compute_feedback(guess, answer)
        history.append((guess, patt))

        if patt == ALL_CORRECT:
            success = True
            break

        candidates = filter_candidates(candidates, guess, patt)

    dt = (time.perf_counter() - t0) * 1000.0
    log.debug("case %s: success=%s in %d guesses", answer, success, len(history))
    return {
        "answer": answer, "success": success, "guesses": len(history),
        "time_ms": dt, "history": history, "exhausted": exhausted,
    }


def run_batch(
        solver,
        answers: List[str],
        *,
        words: List[str],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, ans, words=words, max_turns=max_turns, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """Win rate and mean guesses over solved games."""
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
        "exhausted": sum(1 for r in results if r.get("exhausted")),
    }
