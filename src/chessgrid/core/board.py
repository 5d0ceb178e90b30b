"""Board - an 8x8 grid of spaces indexed by file and rank."""

from __future__ import annotations

import logging
from dataclasses import replace

from chessgrid.core.enums import Color, PieceType
from chessgrid.core.piece import Piece
from chessgrid.core.space import Space
from chessgrid.core.types import File, Rank

_LOGGER = logging.getLogger(__name__)

WHITE_PAWN_RANK = 1
BLACK_PAWN_RANK = 6
WHITE_BACK_RANK = 0
BLACK_BACK_RANK = 7

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable chess board owning exactly 64 spaces.

    Spaces are stored as ``_spaces[file.index][rank.index]``. Accessors that
    return :class:`Space` objects hand out copies, so the grid can only be
    changed through the board itself.

    Args:
        populate: Set up the standard starting position (default ``True``).
    """

    __slots__ = ("_spaces",)

    def __init__(self, populate: bool = True) -> None:
        self._spaces: list[list[Space]] = [
            [Space(file, rank) for rank in Rank] for file in File
        ]
        if populate:
            self.populate()

    def _space(self, file: File, rank: Rank) -> Space:
        """The stored space at *file* and *rank* (not a copy)."""
        if not isinstance(file, File) or not isinstance(rank, Rank):
            raise TypeError(f"Expected (File, Rank), got ({file!r}, {rank!r})")
        return self._spaces[file.index][rank.index]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, key: tuple[File, Rank]) -> Piece | None:
        file, rank = key
        return self._space(file, rank).piece

    def __setitem__(self, key: tuple[File, Rank], piece: Piece | None) -> None:
        file, rank = key
        self._space(file, rank).piece = piece

    def is_empty(self, file: File, rank: Rank) -> bool:
        return self._space(file, rank).piece is None

    def space_at(self, file: File, rank: Rank) -> Space:
        """Copy of the space at *file* and *rank*."""
        return replace(self._space(file, rank))

    def spaces_at_file(self, file: File) -> list[Space]:
        """The 8 spaces of *file*, from rank 1 up to rank 8."""
        return [self.space_at(file, rank) for rank in Rank]

    def spaces_at_rank(self, rank: Rank) -> list[Space]:
        """The 8 spaces of *rank*, from file a across to file h."""
        return [self.space_at(file, rank) for file in File]

    @property
    def spaces(self) -> list[Space]:
        """All 64 spaces, file by file, rank ascending within each file."""
        return [replace(space) for column in self._spaces for space in column]

    # -- Query helpers ------------------------------------------------------

    @property
    def pieces(self) -> list[Piece]:
        """Every occupant, file by file, rank ascending within each file."""
        return [
            space.piece
            for column in self._spaces
            for space in column
            if space.piece is not None
        ]

    @property
    def white_pieces(self) -> list[Piece]:
        return [piece for piece in self.pieces if piece.color.is_white]

    @property
    def black_pieces(self) -> list[Piece]:
        return [piece for piece in self.pieces if piece.color.is_black]

    # -- Mutation / copying -------------------------------------------------

    def populate(self) -> None:
        """Reset to the standard starting position."""
        self.clear()
        for column in self._spaces:
            column[WHITE_PAWN_RANK].piece = Piece(Color.WHITE, PieceType.PAWN)
            column[BLACK_PAWN_RANK].piece = Piece(Color.BLACK, PieceType.PAWN)

        for rank_index, color in (
            (WHITE_BACK_RANK, Color.WHITE),
            (BLACK_BACK_RANK, Color.BLACK),
        ):
            for column, pt in zip(self._spaces, BACK_RANK):
                column[rank_index].piece = Piece(color, pt)
        _LOGGER.debug("Board populated")

    def clear(self) -> None:
        """Remove every piece; all 64 coordinates stay in place."""
        for column in self._spaces:
            for space in column:
                space.clear()
        _LOGGER.debug("Board cleared")

    def copy(self) -> Board:
        b = Board(populate=False)
        b._spaces = [[replace(space) for space in column] for column in self._spaces]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return all(
            ls == rs
            for lcol, rcol in zip(self._spaces, other._spaces)
            for ls, rs in zip(lcol, rcol)
        )

    def __repr__(self) -> str:
        return self.diagram()

    def diagram(self, symbols: bool = False) -> str:
        """Text diagram with rank 8 on top; *symbols* uses Unicode glyphs."""
        rows: list[str] = []
        for rank in reversed(Rank):
            row = []
            for file in File:
                p = self[file, rank]
                if p is None:
                    row.append(".")
                else:
                    row.append(p.symbol if symbols else str(p))
            rows.append(f"{rank.number} {' '.join(row)}")
        rows.append("  " + " ".join(file.character for file in File))
        return "\n".join(rows)
