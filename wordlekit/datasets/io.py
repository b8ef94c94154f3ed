from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordlekit.engine.errors import SourceUnavailable
from wordlekit.engine.feedback import WORD_LENGTH
from wordlekit.engine.validation import is_word

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises SourceUnavailable if the file can't be opened or decoded.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(f"cannot read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def parse_words(lines: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Keep lines that trim to exactly N letters, lowercased, first occurrence
    only. Anything else is skipped without complaint.
    """
    seen = dict.fromkeys(ln.strip().lower() for ln in lines if is_word(ln, N))
    return list(seen)


def load_words(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """Read and parse a word list file (see parse_words)."""
    words = parse_words(read_lines(p), N)
    log.info("loaded %d words from %s", len(words), p)
    return words


