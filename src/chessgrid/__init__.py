"""chessgrid - an 8x8 chess board of addressable, optionally occupied spaces."""

from chessgrid.core import (
    BACK_RANK,
    Board,
    Color,
    File,
    InvalidCoordinateError,
    Piece,
    PieceType,
    Rank,
    Space,
)

__version__ = "0.1.0"

__all__ = [
    "BACK_RANK",
    "Board",
    "Color",
    "File",
    "InvalidCoordinateError",
    "Piece",
    "PieceType",
    "Rank",
    "Space",
    "__version__",
]
