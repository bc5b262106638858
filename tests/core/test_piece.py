"""Tests for Piece."""

import pytest

from chessmoves.core.enums import Color, PieceType
from chessmoves.core.piece import Piece


class TestPiece:
    def test_equal_pieces_are_interchangeable(self) -> None:
        a = Piece(Color.WHITE, PieceType.ROOK)
        b = Piece(Color.WHITE, PieceType.ROOK)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Piece(Color.BLACK, PieceType.ROOK)

    def test_letters(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"
        assert str(Piece(Color.BLACK, PieceType.PAWN)) == "p"

    @pytest.mark.parametrize("char", list("PNBRQKpnbrqk"))
    def test_from_char_inverse(self, char: str) -> None:
        assert str(Piece.from_char(char)) == char

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_symbol(self) -> None:
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"

    def test_recolored(self) -> None:
        assert Piece(Color.WHITE, PieceType.BISHOP).recolored() == Piece(
            Color.BLACK, PieceType.BISHOP
        )

    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE
        assert str(Color.WHITE) == "white"
