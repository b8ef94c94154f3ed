# apps/cli/run.py
"""
CLI entry point for self-play runs.

This script:
  1) Loads and validates the word list (prints counts + SHA); an unreadable
     list exits with status 2.
  2) Instantiates the requested solver.
  3) Plays every word (or a sample) as a hidden answer with a live progress
     indicator and writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, word list hash, summary, git commit
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from tqdm import tqdm

from wordlekit.datasets import load_words, pretty_summary, validate_wordlist
from wordlekit.engine import SourceUnavailable
from wordlekit.harness import WORDLE_MAX_TURNS, run_case, summarize
from wordlekit.harness.io import git_commit_or_unknown, timestamp_id, write_csv, write_manifest
from wordlekit.solvers import create_solver, get_solver_ids
from wordlekit.engine.ranking import ScoringConfig


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="wordlekit: run self-play experiments")
    ap.add_argument("--solver", default="letter_rank",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default="solutions.txt",
                    help="word list used both as vocabulary and as hidden answers")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--bonus", type=float, default=ScoringConfig.distinct_bonus,
                    help="letter_rank: bonus for words without repeated letters")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Load and validate the word list (fatal if unreadable)
    try:
        words = load_words(args.words)
        rep = validate_wordlist(args.words)
    except SourceUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    print(pretty_summary(rep))

    # 2) Instantiate solver by id
    kwargs = {"config": ScoringConfig(distinct_bonus=args.bonus)} if args.solver == "letter_rank" else {}
    solver = create_solver(args.solver, **kwargs)

    # 3) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    total = len(cases)

    # 4) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 5) Run batch with live progress
    for idx, ans in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, ans, words=words, max_turns=WORDLE_MAX_TURNS, seed=per_seed)
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # 6) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "solver_id": solver.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"win rate {summary['win_rate']:.3f} | mean guesses {summary['mean_guesses']:.3f}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
