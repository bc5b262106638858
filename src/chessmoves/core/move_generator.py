"""Pseudo-legal move generation for a single piece.

Moves are generated purely from piece geometry and board occupancy. Whether a
move would leave the mover's own king in check is not considered.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.types import Square

if TYPE_CHECKING:
    from chessmoves.core.board import Board

_LOGGER = logging.getLogger(__name__)

Direction = tuple[int, int]  # (row delta, col delta)

KNIGHT_OFFSETS: tuple[Direction, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Direction, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Direction, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Direction, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Direction, ...] = BISHOP_DIRS + ROOK_DIRS

PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

# piece type -> (directions, whether rays extend past the first step)
_MOVEMENT: dict[PieceType, tuple[tuple[Direction, ...], bool]] = {
    PieceType.ROOK: (ROOK_DIRS, True),
    PieceType.BISHOP: (BISHOP_DIRS, True),
    PieceType.QUEEN: (QUEEN_DIRS, True),
    PieceType.KING: (KING_OFFSETS, False),
    PieceType.KNIGHT: (KNIGHT_OFFSETS, False),
}

# color -> (forward row delta, start row, far row)
_PAWN_GEOMETRY: dict[Color, tuple[int, int, int]] = {
    Color.WHITE: (1, 2, 8),
    Color.BLACK: (-1, 7, 1),
}


class MoveGenerator:
    """Stateless pseudo-legal move generator.

    Every method takes the board explicitly and never mutates it, so a single
    board may be queried from several readers as long as nobody writes to it
    during generation.
    """

    __slots__ = ()

    # -- Public API ---------------------------------------------------------

    @staticmethod
    def moves_for(board: Board, square: Square) -> set[Move]:
        """All pseudo-legal moves of the piece standing on *square*.

        Raises:
            ValueError: If *square* is empty.
        """
        piece = board[square]
        if piece is None:
            raise ValueError(f"No piece on {square.name}")

        moves: set[Move] = set()
        if piece.piece_type == PieceType.PAWN:
            MoveGenerator._gen_pawn(board, square, piece.color, moves)
        else:
            directions, extends = _MOVEMENT[piece.piece_type]
            for direction in directions:
                MoveGenerator._cast(board, square, piece.color, direction, extends, moves)

        _LOGGER.debug("%s on %s: %d moves", piece, square.name, len(moves))
        return moves

    @staticmethod
    def moves_for_color(board: Board, color: Color) -> set[Move]:
        """Union of :meth:`moves_for` over every piece of *color*."""
        moves: set[Move] = set()
        for sq, _ in board.pieces(color):
            moves |= MoveGenerator.moves_for(board, sq)
        return moves

    @staticmethod
    def destinations(board: Board, square: Square) -> set[Square]:
        """Distinct target squares; promotion variants collapse to one."""
        return {move.end for move in MoveGenerator.moves_for(board, square)}

    # -- Piece-specific generators (private) -------------------------------

    @staticmethod
    def _cast(
        board: Board,
        start: Square,
        color: Color,
        direction: Direction,
        extends: bool,
        moves: set[Move],
    ) -> None:
        drow, dcol = direction
        current = start.offset(drow, dcol)
        while current is not None:
            target = board[current]
            if target is None:
                moves.add(Move(start, current))
                if not extends:
                    return
                current = current.offset(drow, dcol)
                continue
            if target.color != color:
                moves.add(Move(start, current))
            return

    @staticmethod
    def _gen_pawn(board: Board, sq: Square, color: Color, moves: set[Move]) -> None:
        forward, start_row, far_row = _PAWN_GEOMETRY[color]

        for dcol in (-1, 1):
            cap_sq = sq.offset(forward, dcol)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None and target.color != color:
                MoveGenerator._add_pawn_move(sq, cap_sq, far_row, moves)

        one_step = sq.offset(forward, 0)
        if one_step is None or board[one_step] is not None:
            return

        if sq.row == start_row:
            moves.add(Move(sq, one_step))
            two_step = one_step.offset(forward, 0)
            if two_step is not None and board[two_step] is None:
                moves.add(Move(sq, two_step))
            return

        MoveGenerator._add_pawn_move(sq, one_step, far_row, moves)

    @staticmethod
    def _add_pawn_move(start: Square, end: Square, far_row: int, moves: set[Move]) -> None:
        if end.row == far_row:
            for pt in PROMOTION_TYPES:
                moves.add(Move(start, end, pt))
        else:
            moves.add(Move(start, end))
