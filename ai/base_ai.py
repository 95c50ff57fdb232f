"""Base player interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import Board, Move
from engine.pieces import PieceColor


class BaseAI(ABC):
    """Abstract player strategy contract."""

    @property
    def is_auto(self) -> bool:
        """Whether moves are computed rather than read from a person."""
        return True

    @abstractmethod
    def choose_move(self, board: Board, color: PieceColor) -> Move:
        """Choose a legal move (or a pass) for ``color`` on the given board."""
        raise NotImplementedError
