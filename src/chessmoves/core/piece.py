"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import Color, PieceType

_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

# Letter ↔ (Color, PieceType); upper case is white.
_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    **{letter: (Color.WHITE, pt) for pt, letter in _LETTERS.items()},
    **{letter.lower(): (Color.BLACK, pt) for pt, letter in _LETTERS.items()},
}
_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece.

    Two pieces of the same color and type are equal and interchangeable.
    """

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """Single letter (uppercase = white, lowercase = black)."""
        return _CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    def recolored(self) -> Piece:
        """Same kind, opposite color."""
        return Piece(self.color.opposite, self.piece_type)
