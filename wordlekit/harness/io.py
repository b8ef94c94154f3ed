"""
Report files for self-play runs.

A run produces two artifacts next to each other in the output directory:
a CSV with one row per game (turn-by-turn guesses and their feedback) and
a JSON manifest describing how the run was made.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List

from wordlekit.engine import pattern_to_str

SUMMARY_COLUMNS = ["solver", "answer", "success", "guesses", "exhausted", "time_ms"]


def result_columns(max_turns: int) -> List[str]:
    """Header for a results CSV: summary columns, then a guess/pattern pair per turn."""
    turns = [col for t in range(1, max_turns + 1) for col in (f"guess_{t}", f"patt_{t}")]
    return SUMMARY_COLUMNS + turns


def _pattern_cell(pattern) -> str:
    # leading quote keeps spreadsheets from reading "-GYY-" as a formula
    return "'" + pattern_to_str(pattern)


def _result_row(result: Dict, max_turns: int) -> Dict:
    row = {
        "solver": result.get("solver_id", "?"),
        "answer": result["answer"],
        "success": result["success"],
        "guesses": result["guesses"],
        "exhausted": result.get("exhausted", False),
        "time_ms": round(float(result["time_ms"]), 3),
    }
    turns = list(result.get("history", []))[:max_turns]
    for t in range(1, max_turns + 1):
        row[f"guess_{t}"] = row[f"patt_{t}"] = ""
    for t, (guess, pattern) in enumerate(turns, 1):
        row[f"guess_{t}"] = guess
        row[f"patt_{t}"] = _pattern_cell(pattern)
    return row


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """Write one row per game to `path` (parents created) and return the path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with out.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=result_columns(max_turns))
        writer.writeheader()
        writer.writerows(_result_row(r, max_turns) for r in results)
    return str(out)


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump the run manifest (config, word list report, summary) as indented JSON."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(out)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, or 'unknown' outside a git checkout."""
    try:
        proc = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return proc.stdout.decode().strip()
