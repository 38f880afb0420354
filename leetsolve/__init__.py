"""Solutions to classic two-sum, linked-list, substring, median, zigzag and integer puzzles."""

__version__ = "0.1.0"