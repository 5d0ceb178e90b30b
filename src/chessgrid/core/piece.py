"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessgrid.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# Glyph order follows PieceType: pawn, knight, bishop, rook, queen, king
_GLYPHS: dict[Color, str] = {
    Color.WHITE: "♙♘♗♖♕♔",
    Color.BLACK: "♟♞♝♜♛♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable chess piece: a kind tagged with its owning color."""

    color: Color
    piece_type: PieceType

    # ── Variant constructors ─────────────────────────────────────────────

    @classmethod
    def pawn(cls, color: Color) -> Piece:
        return cls(color, PieceType.PAWN)

    @classmethod
    def knight(cls, color: Color) -> Piece:
        return cls(color, PieceType.KNIGHT)

    @classmethod
    def bishop(cls, color: Color) -> Piece:
        return cls(color, PieceType.BISHOP)

    @classmethod
    def rook(cls, color: Color) -> Piece:
        return cls(color, PieceType.ROOK)

    @classmethod
    def queen(cls, color: Color) -> Piece:
        return cls(color, PieceType.QUEEN)

    @classmethod
    def king(cls, color: Color) -> Piece:
        return cls(color, PieceType.KING)

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter, uppercase for white: ``'N'``, ``'q'``."""
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color.is_white else letter

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _GLYPHS[self.color][self.piece_type - 1]
