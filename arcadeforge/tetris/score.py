"""The running score and the high score kept in a small text file."""

from __future__ import annotations

import os
import string
from itertools import takewhile
from pathlib import Path

FILE_SCORE = "gamescore.txt"
_READ_LIMIT = 20


def load_high_score(path: str | os.PathLike[str] = FILE_SCORE) -> int:
    """Read the stored high score; a missing or unreadable file counts as 0.

    Only the leading decimal digits of the first 20 characters are used.
    """
    try:
        with open(path, encoding="ascii", errors="replace") as handle:
            text = handle.read(_READ_LIMIT)
    except OSError:
        return 0
    digits = "".join(takewhile(lambda ch: ch in string.digits, text))
    return int(digits) if digits else 0


def save_high_score(path: str | os.PathLike[str], value: int) -> None:
    """Write ``value`` as the stored high score."""
    if value < 0:
        raise ValueError(f"a score cannot be negative, got {value}")
    Path(path).write_text(str(value), encoding="ascii")


class Score:
    """The current game's points and the best score so far."""

    def __init__(self, path: str | os.PathLike[str] = FILE_SCORE) -> None:
        self.path = path
        self.high = load_high_score(path)
        self.current = 0
        self.new_high = False

    def reset(self) -> None:
        """Start a new game's count; the high score is kept."""
        self.current = 0
        self.new_high = False

    def add(self, points: int) -> int:
        """Add points, note whether the high score was beaten, return the total."""
        if points < 0:
            raise ValueError(f"points cannot be negative, got {points}")
        self.current += points
        if self.current > self.high:
            self.new_high = True
        return self.current

    def commit_high_score(self) -> bool:
        """Store the current score as the high score if it beat it; True if stored."""
        if not self.new_high:
            return False
        self.high = self.current
        save_high_score(self.path, self.high)
        return True