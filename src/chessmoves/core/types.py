"""Square value type and coordinate helpers.

Squares are addressed by 1-based ``(row, col)`` pairs:
    row 1 = rank 1 (White's back rank) ... row 8 = rank 8
    col 1 = file a ... col 8 = file h

Storage inside :class:`~chessmoves.core.board.Board` is a flat 0-based list;
:attr:`Square.index` is the only place the two schemes meet.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
_FILES = "abcdefgh"


def on_board(row: int, col: int) -> bool:
    """Whether raw 1-based coordinates fall inside the board."""
    return 1 <= row <= BOARD_SIZE and 1 <= col <= BOARD_SIZE


@dataclass(frozen=True, order=True, slots=True)
class Square:
    """Immutable board coordinate, ordered by ``(row, col)``."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not on_board(self.row, self.col):
            raise ValueError(f"Square out of range: ({self.row}, {self.col})")

    @classmethod
    def from_index(cls, index: int) -> Square:
        """Inverse of :attr:`index`, e.g. 0 → a1, 63 → h8."""
        if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Square index out of range: {index}")
        return cls(index // BOARD_SIZE + 1, index % BOARD_SIZE + 1)

    @property
    def index(self) -> int:
        """0-based flat index (a1=0, b1=1, ..., h8=63)."""
        return (self.row - 1) * BOARD_SIZE + (self.col - 1)

    @property
    def name(self) -> str:
        """Algebraic name, e.g. ``Square(4, 5).name == 'e4'``."""
        return f"{_FILES[self.col - 1]}{self.row}"

    def offset(self, drow: int, dcol: int) -> Square | None:
        """Square reached by stepping ``(drow, dcol)``, or None if off-board."""
        row = self.row + drow
        col = self.col + dcol
        if not on_board(row, col):
            return None
        return Square(row, col)

    def mirrored(self) -> Square:
        """Reflection across the horizontal axis (row ↔ 9 - row)."""
        return Square(BOARD_SIZE + 1 - self.row, self.col)

    def __str__(self) -> str:
        return self.name


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square.from_index(i) for i in range(BOARD_SIZE * BOARD_SIZE)
)

# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
