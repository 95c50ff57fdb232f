"""Ataxx board state, move legality, and move application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from engine.pieces import PieceColor
from engine.rules import (
    COLUMNS,
    JUMP_LIMIT,
    ROWS,
    SIDE,
    Square,
    distance,
    in_bounds,
    iter_squares,
    neighbors,
    offset,
    reflections,
    square_index,
)

PASS_MARKER = "-"


@dataclass(frozen=True)
class Move:
    """An Ataxx action: a pass, or a piece moving from one square to another."""

    kind: str
    from_pos: Optional[Square] = None
    to_pos: Optional[Square] = None

    @classmethod
    def pass_move(cls) -> "Move":
        return cls(kind="pass")

    @classmethod
    def move(cls, col0: str, row0: str, col1: str, row1: str) -> "Move":
        return cls(kind="move", from_pos=(col0, row0), to_pos=(col1, row1))

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse the 4-character encoding (e.g. ``a7b6``) or the pass marker.

        A dash between the squares (``a7-b6``) is also accepted.
        """
        cleaned = text.strip()
        if cleaned == PASS_MARKER:
            return cls.pass_move()
        if len(cleaned) == 5 and cleaned[2] == "-":
            cleaned = cleaned[:2] + cleaned[3:]
        if len(cleaned) != 4:
            raise ValueError(f"Malformed move: {text!r}")
        col0, row0, col1, row1 = cleaned
        if not (in_bounds(col0, row0) and in_bounds(col1, row1)):
            raise ValueError(f"Move off the board: {text!r}")
        return cls.move(col0, row0, col1, row1)

    @property
    def is_pass(self) -> bool:
        return self.kind == "pass"

    @property
    def is_extend(self) -> bool:
        return not self.is_pass and distance(*self.from_pos, *self.to_pos) == 1

    @property
    def is_jump(self) -> bool:
        return not self.is_pass and distance(*self.from_pos, *self.to_pos) == 2

    def __str__(self) -> str:
        if self.is_pass:
            return PASS_MARKER
        return "".join(self.from_pos + self.to_pos)


class Board:
    """7x7 Ataxx board. Red moves first."""

    def __init__(self) -> None:
        self.grid = np.zeros((SIDE, SIDE), dtype=np.int8)
        self.whose_move = PieceColor.RED
        self.num_jumps = 0
        self.set("a", "7", PieceColor.RED)
        self.set("g", "1", PieceColor.RED)
        self.set("a", "1", PieceColor.BLUE)
        self.set("g", "7", PieceColor.BLUE)

    def clone(self) -> "Board":
        """Deep copy board state."""
        cloned = Board.__new__(Board)
        cloned.grid = self.grid.copy()
        cloned.whose_move = self.whose_move
        cloned.num_jumps = self.num_jumps
        return cloned

    def clear(self) -> None:
        """Empty every square and give Red the move."""
        self.grid.fill(PieceColor.EMPTY.code)
        self.whose_move = PieceColor.RED
        self.num_jumps = 0

    def get(self, col: str, row: str) -> PieceColor:
        """Return the contents of a square."""
        if not in_bounds(col, row):
            raise ValueError(f"Square off the board: {col}{row}")
        return PieceColor.from_code(self.grid[square_index(col, row)])

    def set(self, col: str, row: str, color: PieceColor) -> None:
        if not in_bounds(col, row):
            raise ValueError(f"Square off the board: {col}{row}")
        self.grid[square_index(col, row)] = color.code

    def set_block(self, col: str, row: str) -> None:
        """Block a square and its mirror images."""
        squares = reflections(col, row)
        for square in squares:
            if self.get(*square) is not PieceColor.EMPTY:
                raise ValueError(f"Cannot block occupied square {''.join(square)}")
        for square in squares:
            self.set(*square, PieceColor.BLOCKED)

    def num_pieces(self, color: PieceColor) -> int:
        return int(np.count_nonzero(self.grid == color.code))

    def legal_move(self, col0: str, row0: str, col1: str, row1: str) -> bool:
        """Return whether the side to move may move from (col0, row0) to (col1, row1)."""
        if not (in_bounds(col0, row0) and in_bounds(col1, row1)):
            return False
        if self.get(col0, row0) is not self.whose_move:
            return False
        if self.get(col1, row1) is not PieceColor.EMPTY:
            return False
        return distance(col0, row0, col1, row1) in (1, 2)

    def legal(self, move: Move) -> bool:
        if move.is_pass:
            return not self.can_move(self.whose_move)
        return self.legal_move(*move.from_pos, *move.to_pos)

    def can_move(self, color: PieceColor) -> bool:
        """Return whether any piece of ``color`` has a reachable empty square."""
        for col, row in iter_squares():
            if self.get(col, row) is not color:
                continue
            for dc in range(-2, 3):
                for dr in range(-2, 3):
                    c1, r1 = offset(col, row, dc, dr)
                    if in_bounds(c1, r1) and self.get(c1, r1) is PieceColor.EMPTY:
                        return True
        return False

    def make_move(self, col0: str, row0: str, col1: str, row1: str) -> None:
        """Apply a legal move for the side to move and switch turn."""
        if not self.legal_move(col0, row0, col1, row1):
            raise ValueError(f"Illegal move: {col0}{row0}{col1}{row1}")
        mover = self.whose_move
        if distance(col0, row0, col1, row1) == 2:
            self.set(col0, row0, PieceColor.EMPTY)
            self.num_jumps += 1
        else:
            self.num_jumps = 0
        self.set(col1, row1, mover)
        for col, row in neighbors(col1, row1):
            if self.get(col, row) is mover.opposite():
                self.set(col, row, mover)
        self.whose_move = mover.opposite()

    def pass_turn(self) -> None:
        if self.can_move(self.whose_move):
            raise ValueError(f"Illegal pass: {self.whose_move.value} can move")
        self.whose_move = self.whose_move.opposite()

    def apply_move(self, move: Move) -> None:
        if move.is_pass:
            self.pass_turn()
        else:
            self.make_move(*move.from_pos, *move.to_pos)

    def get_winner(self) -> Optional[PieceColor]:
        """Return None while the game is on, else the winner or EMPTY for a tie."""
        red = self.num_pieces(PieceColor.RED)
        blue = self.num_pieces(PieceColor.BLUE)
        over = (
            red == 0
            or blue == 0
            or self.num_jumps >= JUMP_LIMIT
            or (not self.can_move(PieceColor.RED) and not self.can_move(PieceColor.BLUE))
        )
        if not over:
            return None
        if red > blue:
            return PieceColor.RED
        if blue > red:
            return PieceColor.BLUE
        return PieceColor.EMPTY

    def render_ascii(self) -> str:
        """Return a simple human-readable board representation."""
        lines: List[str] = []
        for row in reversed(ROWS):
            cells = [self.get(col, row).symbol for col in COLUMNS]
            lines.append(f"{row}  " + " ".join(cells))
        lines.append("   " + " ".join(COLUMNS))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            np.array_equal(self.grid, other.grid)
            and self.whose_move is other.whose_move
            and self.num_jumps == other.num_jumps
        )
