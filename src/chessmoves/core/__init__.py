"""Core domain layer — board storage and pseudo-legal move generation.

Quick start::

    from chessmoves.core import Board, MoveGenerator
    from chessmoves.core.types import E2

    board = Board.initial()
    for move in MoveGenerator.moves_for(board, E2):
        print(move)
"""

from chessmoves.core.board import BACK_RANK, Board
from chessmoves.core.enums import Color, PieceType
from chessmoves.core.move import Move
from chessmoves.core.move_generator import PROMOTION_TYPES, MoveGenerator
from chessmoves.core.piece import Piece
from chessmoves.core.types import ALL_SQUARES, BOARD_SIZE, Square, on_board

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Square",
    "on_board",
    # Domain objects
    "BACK_RANK",
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "PROMOTION_TYPES",
]
