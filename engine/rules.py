"""Geometry helpers for the 7x7 Ataxx board."""

from __future__ import annotations

from typing import Iterable, List, Tuple

SIDE = 7
COLUMNS = "abcdefg"
ROWS = "1234567"

# The game ends after this many consecutive jumps with no extend in between.
JUMP_LIMIT = 25

Square = Tuple[str, str]


def in_bounds(col: str, row: str) -> bool:
    """Return whether a (column, row) character pair names a board square."""
    return len(col) == 1 and len(row) == 1 and col in COLUMNS and row in ROWS


def square_index(col: str, row: str) -> Tuple[int, int]:
    """Return (row_index, col_index) into the board array."""
    return ROWS.index(row), COLUMNS.index(col)


def offset(col: str, row: str, dc: int, dr: int) -> Square:
    """Shift a square by raw character offsets; the result may be off-board."""
    return chr(ord(col) + dc), chr(ord(row) + dr)


def distance(col0: str, row0: str, col1: str, row1: str) -> int:
    """Chebyshev distance between two squares."""
    return max(abs(ord(col0) - ord(col1)), abs(ord(row0) - ord(row1)))


def iter_squares() -> Iterable[Square]:
    """Yield all squares, columns a..g outer, rows 1..7 inner."""
    for col in COLUMNS:
        for row in ROWS:
            yield (col, row)


def neighbors(col: str, row: str) -> Iterable[Square]:
    """Yield the in-bounds squares adjacent to a square."""
    for dc in (-1, 0, 1):
        for dr in (-1, 0, 1):
            if dc == 0 and dr == 0:
                continue
            candidate = offset(col, row, dc, dr)
            if in_bounds(*candidate):
                yield candidate


def reflections(col: str, row: str) -> List[Square]:
    """Return a square and its mirror images across both center lines."""
    mirror_col = COLUMNS[SIDE - 1 - COLUMNS.index(col)]
    mirror_row = ROWS[SIDE - 1 - ROWS.index(row)]
    squares: List[Square] = []
    for candidate in ((col, row), (mirror_col, row), (col, mirror_row), (mirror_col, mirror_row)):
        if candidate not in squares:
            squares.append(candidate)
    return squares
