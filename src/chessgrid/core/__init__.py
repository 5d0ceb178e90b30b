"""Core domain layer — chess board state with zero external dependencies.

Quick start::

    from chessgrid.core import Board, File, Rank

    board = Board()
    board[File.E, Rank.TWO]                 # white pawn
    board.space_at(File.E, Rank.FOUR).name  # "e4"
"""

from chessgrid.core.board import BACK_RANK, Board
from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.space import Space
from chessgrid.core.types import File, InvalidCoordinateError, Rank

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Coordinates
    "File",
    "Rank",
    "InvalidCoordinateError",
    # Domain objects
    "BACK_RANK",
    "Board",
    "Piece",
    "Space",
]
