"""File and rank coordinate types.

Both are closed eight-value enumerations, so any ``(File, Rank)`` pair names
a real square. They are plain enums, not ints: ``File.B != Rank.ONE`` and
neither compares equal to a raw index. Raw integer indices are validated
once, at the ``from_index`` boundary::

    File.from_index(4)  # File.E
    Rank.from_index(3)  # Rank.FOUR
    File.from_index(8)  # InvalidCoordinateError
"""

from __future__ import annotations

from enum import Enum


class InvalidCoordinateError(ValueError):
    """Raised when a raw column/row index falls outside 0–7."""


def _check_index(kind: str, index: object) -> int:
    # bool is an int subclass but never a meaningful coordinate.
    if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < 8:
        raise InvalidCoordinateError(f"Invalid {kind} index: {index!r}")
    return index


class File(Enum):
    """Board column a–h; the value is the column index 0–7."""

    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7

    @classmethod
    def from_index(cls, column: int) -> File:
        """File at *column* (0–7)."""
        return cls(_check_index("file", column))

    @property
    def index(self) -> int:
        return self.value

    @property
    def character(self) -> str:
        """Display character, e.g. ``File.E`` → ``'e'``."""
        return "abcdefgh"[self.value]

    def __str__(self) -> str:
        return self.character


class Rank(Enum):
    """Board row 1–8; the value is the row index 0–7."""

    ONE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7

    @classmethod
    def from_index(cls, row: int) -> Rank:
        """Rank at row index *row* (0–7)."""
        return cls(_check_index("rank", row))

    @property
    def index(self) -> int:
        return self.value

    @property
    def number(self) -> int:
        """Displayed rank number, e.g. ``Rank.FOUR`` → ``4``."""
        return self.value + 1

    def __str__(self) -> str:
        return str(self.number)
