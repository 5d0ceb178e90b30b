"""Space - a single cell of the board."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color
from chessgrid.core.piece import Piece
from chessgrid.core.types import File, Rank


@dataclass(slots=True)
class Space:
    """A board coordinate plus its optional occupant.

    Equality covers ``piece``, ``file`` and ``rank``; ``color`` and ``name``
    are derived from the coordinate.
    """

    file: File
    rank: Rank
    piece: Piece | None = None

    @property
    def color(self) -> Color:
        """Square color: a1 is dark, b1 and a2 are light."""
        if self.file.index % 2 != self.rank.index % 2:
            return Color.WHITE
        return Color.BLACK

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``'e4'``."""
        return f"{self.file.character}{self.rank.number}"

    @property
    def is_empty(self) -> bool:
        return self.piece is None

    def clear(self) -> Piece | None:
        """Remove the occupant and return it (``None`` if already empty)."""
        piece = self.piece
        self.piece = None
        return piece

    def __str__(self) -> str:
        return f'Space("{self.name}" {self.piece})'
