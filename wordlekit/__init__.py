"""wordlekit: constraint-based helper for 5-letter word puzzles."""

__version__ = "1.0.0"
