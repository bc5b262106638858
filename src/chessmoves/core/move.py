"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessmoves.core.enums import PieceType
from chessmoves.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object for a single piece movement.

    ``promotion`` is set only when a pawn reaches the far rank.
    """

    start: Square
    end: Square
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{self.start.name}{self.end.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None
