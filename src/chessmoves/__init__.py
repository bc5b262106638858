"""chessmoves — chess board state and pseudo-legal move generation."""

from chessmoves.core import (
    Board,
    Color,
    Move,
    MoveGenerator,
    Piece,
    PieceType,
    Square,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "Color",
    "Move",
    "MoveGenerator",
    "Piece",
    "PieceType",
    "Square",
    "__version__",
]
