"""Piece colors for Ataxx."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class PieceColor(str, Enum):
    """Contents of one Ataxx square."""

    EMPTY = "empty"
    BLOCKED = "blocked"
    RED = "red"
    BLUE = "blue"

    def opposite(self) -> "PieceColor":
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @property
    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    @property
    def symbol(self) -> str:
        return COLOR_SYMBOL[self]

    @property
    def code(self) -> int:
        """Integer stored in the board array for this color."""
        return COLOR_CODE[self]

    @classmethod
    def from_code(cls, code: int) -> "PieceColor":
        return CODE_COLOR[int(code)]


COLOR_SYMBOL: Dict[PieceColor, str] = {
    PieceColor.EMPTY: "-",
    PieceColor.BLOCKED: "X",
    PieceColor.RED: "r",
    PieceColor.BLUE: "b",
}

COLOR_CODE: Dict[PieceColor, int] = {
    PieceColor.EMPTY: 0,
    PieceColor.BLOCKED: 3,
    PieceColor.RED: 1,
    PieceColor.BLUE: 2,
}

CODE_COLOR: Dict[int, PieceColor] = {code: color for color, code in COLOR_CODE.items()}
