"""
Word list validator.

What this module does:
- Check a word list file against the loader's rules (a–z only, exact
  length 5 after trimming, one per line).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a one-line summary.

The loader itself is lenient (bad lines are skipped); this report is how
you find out how much it skipped.

Typical use:
    from wordlekit.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("solutions.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordlekit.engine.errors import SourceUnavailable
from wordlekit.engine.feedback import WORD_LENGTH
from wordlekit.engine.validation import is_word


@dataclass
class WordListReport:
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    N: int               # word length checked
    count: int           # number of VALID lines
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # non-blank lines that are not N-letter words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines are ignored, not
    counted as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                continue
            if is_word(raw, N):
                valid.append(raw.strip().lower())
            else:
                invalid += 1
    return valid, invalid


def validate_wordlist(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (WordListReport schema). `passed` is
    strict: the file exists, has at least one valid word, and no duplicates.
    A file that exists but cannot be read or decoded raises SourceUnavailable.
    Invalid lines are reported as issues but do not fail the check, since
    the loader skips them.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, N, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p, N)
        sha = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(f"cannot read word list {p}: {e}") from e
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        issues.append(f"{invalid} line(s) skipped (not {N} letters a-z)")
    if unique != len(words):
        issues.append(f"{len(words) - unique} duplicate line(s)")

    rep = WordListReport(
        path=str(p),
        exists=True,
        N=N,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=sha,
        passed=bool(words) and unique == len(words),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        words=2315 (uniq=2315, skipped=0, sha=abc123def456) | N=5 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"skipped={report['invalid_lines']}, sha={sha}) "
        f"| N={report['N']} | {status}"
    )
