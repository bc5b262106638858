"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece
from chessmoves.core.types import ALL_SQUARES, BOARD_SIZE, Square

_LOGGER = logging.getLogger(__name__)

_SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

# Column 1..8 → back-rank piece type, identical for both colors.
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

# Color → (back-rank row, pawn row)
_HOME_ROWS: dict[Color, tuple[int, int]] = {
    Color.WHITE: (1, 2),
    Color.BLACK: (8, 7),
}


def _index(sq: Square) -> int:
    if not isinstance(sq, Square):
        raise TypeError(f"Expected Square, got {type(sq).__name__}")
    return sq.index


class Board:
    """Mutable 64-square board.

    Each square holds a :class:`Piece` or ``None`` for empty. Two boards are
    equal (and hash equal) when every square holds an equal occupant.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * _SQUARE_COUNT

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[_index(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if piece is not None and not isinstance(piece, Piece):
            raise TypeError(f"Expected Piece or None, got {type(piece).__name__}")
        self._squares[_index(sq)] = piece

    def place(self, sq: Square, piece: Piece | None) -> None:
        """Put *piece* on *sq*, replacing any occupant. ``None`` clears it."""
        self[sq] = piece

    def piece_at(self, sq: Square) -> Piece | None:
        """The piece on *sq*, or ``None`` if the square is empty."""
        return self[sq]

    def remove(self, sq: Square) -> Piece | None:
        """Clear *sq* and return whatever stood there."""
        idx = _index(sq)
        piece = self._squares[idx]
        self._squares[idx] = None
        return piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[_index(sq)] is None

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares in index order, optionally only *color*'s."""
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield sq, piece

    def __len__(self) -> int:
        return sum(1 for piece in self._squares if piece is not None)

    # -- Mutation / copying -------------------------------------------------

    def reset(self) -> None:
        """Overwrite every square with the standard starting position."""
        self._squares = [None] * _SQUARE_COUNT
        for color, (back_row, pawn_row) in _HOME_ROWS.items():
            for col, pt in enumerate(BACK_RANK, start=1):
                self[Square(back_row, col)] = Piece(color, pt)
                self[Square(pawn_row, col)] = Piece(color, PieceType.PAWN)
        _LOGGER.debug("Board reset to starting position")

    def clear(self) -> None:
        self._squares = [None] * _SQUARE_COUNT
        _LOGGER.debug("Board cleared")

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def mirrored(self) -> Board:
        """Board flipped top-to-bottom with every piece's color swapped."""
        b = Board()
        for sq, piece in self.pieces():
            b[sq.mirrored()] = piece.recolored()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.reset()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(tuple(self._squares))

    def __repr__(self) -> str:
        # Row 1 first, one "|X" cell per column, blank for empty.
        rows: list[str] = []
        for start in range(0, _SQUARE_COUNT, BOARD_SIZE):
            cells = self._squares[start : start + BOARD_SIZE]
            rows.append("".join(f"|{p if p is not None else ' '}" for p in cells))
        return "\n".join(rows)
