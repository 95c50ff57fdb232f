"""Player that reads moves typed by a person."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ai.base_ai import BaseAI
from engine.board import Board, Move
from engine.pieces import PieceColor

LOGGER = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit"}


class QuitGame(Exception):
    """Raised when the person asks to stop playing."""


class HumanPlayer(BaseAI):
    """Prompts until a legal move is entered."""

    def __init__(
        self,
        read_line: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._read_line = read_line or input
        self._write = write or print

    @property
    def is_auto(self) -> bool:
        return False

    def choose_move(self, board: Board, color: PieceColor) -> Move:
        if not board.can_move(color):
            self._write(f"{color.value} has no legal move and passes.")
            return Move.pass_move()

        while True:
            text = self._read_line(f"{color.value}> ").strip()
            if text.lower() in QUIT_COMMANDS:
                raise QuitGame()
            if text.lower() == "help":
                self._write("Enter moves as <col><row><col><row>, e.g. a7b6. Type quit to stop.")
                continue
            try:
                move = Move.parse(text)
            except ValueError:
                self._write("Invalid move format.")
                continue
            if move.is_pass or not board.legal(move):
                LOGGER.debug("Rejected move %s for %s", text, color.value)
                self._write("Illegal move for current state.")
                continue
            return move
