"""Shared fixtures for Ataxx tests."""

from typing import Iterable

import pytest

from engine.board import Board
from engine.pieces import PieceColor


@pytest.fixture
def make_board():
    """Build a board from square lists, e.g. make_board(red=["c3"], blue=["d4"])."""

    def _make(
        red: Iterable[str] = (),
        blue: Iterable[str] = (),
        blocked: Iterable[str] = (),
        to_move: PieceColor = PieceColor.RED,
    ) -> Board:
        board = Board()
        board.clear()
        for color, squares in (
            (PieceColor.RED, red),
            (PieceColor.BLUE, blue),
            (PieceColor.BLOCKED, blocked),
        ):
            for square in squares:
                board.set(square[0], square[1], color)
        board.whose_move = to_move
        return board

    return _make


@pytest.fixture
def stuck_red(make_board):
    """Red on a1 walled in by blocks; Blue free on g7."""
    walls = ["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"]
    return make_board(red=["a1"], blue=["g7"], blocked=walls)
