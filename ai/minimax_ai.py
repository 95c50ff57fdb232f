"""Minimax AI with alpha-beta pruning for Ataxx."""

from __future__ import annotations

import logging
import time
from typing import List, Optional, Tuple

from ai.base_ai import BaseAI
from ai.config import DEFAULT_MAX_DEPTH
from engine.board import Board, Move
from engine.pieces import PieceColor
from engine.rules import iter_squares, offset

LOGGER = logging.getLogger(__name__)

# Magnitude of a won position; the remaining depth is added so faster wins score higher.
WINNING_VALUE = 2**31 - 1 - 20
# Larger than any position value.
INFTY = 2**31 - 1


class MinimaxAI(BaseAI):
    """Fixed-depth alpha-beta player.

    Scores are always taken from the point of view of the color the AI is
    finding a move for. Red searches with ``og_sense = 1``, Blue with
    ``og_sense = -1``; a frame whose ``sense`` equals ``og_sense`` is a
    maximizing frame, any other frame is minimizing.
    """

    def __init__(self, depth: int = DEFAULT_MAX_DEPTH, color: Optional[PieceColor] = None) -> None:
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}")
        self.max_depth = depth
        self.my_color = PieceColor.RED
        self.og_sense = 1
        self.nodes_searched = 0
        if color is not None:
            self.set_color(color)

    def set_color(self, color: PieceColor) -> None:
        """Fix the side the search maximizes for."""
        if not color.is_piece:
            raise ValueError(f"Cannot search for {color.value}")
        self.my_color = color
        self.og_sense = 1 if color is PieceColor.RED else -1

    def choose_move(self, board: Board, color: PieceColor) -> Move:
        """Return the move to play for ``color``, or a pass if it cannot move."""
        if not board.can_move(color):
            LOGGER.debug("%s cannot move; passing", color.value)
            return Move.pass_move()
        debug = LOGGER.isEnabledFor(logging.DEBUG)
        started = time.perf_counter() if debug else 0.0
        move = self.find_move(board, color)
        if debug:
            LOGGER.debug(
                "Minimax selected %s for %s (%d nodes, %.3fs)",
                move,
                color.value,
                self.nodes_searched,
                time.perf_counter() - started,
            )
        return move

    def find_move(self, board: Board, color: PieceColor) -> Move:
        """Search a copy of ``board`` and return the best move, assuming there is one."""
        self.set_color(color)
        self.nodes_searched = 0
        score, found = self.search(board.clone(), self.max_depth, True, self.og_sense, -INFTY, INFTY)
        if found is None:
            raise RuntimeError("No legal moves available.")
        LOGGER.debug("Root score %d for %s", score, found)
        return self._to_move(found)

    def search(
        self,
        board: Board,
        depth: int,
        save_move: bool,
        sense: int,
        alpha: int,
        beta: int,
    ) -> Tuple[int, Optional[str]]:
        """Return the value of ``board`` searched ``depth`` plies deep.

        When ``save_move`` is set the best move found at this frame is returned
        alongside the value, otherwise the second element is None. A depth of
        zero or a finished game yields the static score and no move. A frame
        with no moves for the side to play returns ``-INFTY``.
        """
        self.nodes_searched += 1
        if depth == 0 or board.get_winner() is not None:
            return self.static_score(board, WINNING_VALUE + depth), None

        maximizing = sense == self.og_sense
        color = self.my_color if maximizing else self.my_color.opposite()
        moves = self.move_list(board, color)

        # Keys are compared in the frame's own direction: larger is better for
        # the maximizer, smaller for the minimizer.
        direction = sense * self.og_sense
        best_score = -INFTY
        best_key = -INFTY
        best_move: Optional[str] = None
        index = 0
        while alpha < beta and index < len(moves):
            move = moves[index]
            child = self._make_move(board, move)
            if depth == self.max_depth and child.get_winner() is self.my_color:
                return INFTY, move if save_move else None
            score, _ = self.search(child, depth - 1, False, -sense, alpha, beta)
            if maximizing:
                if score > alpha:
                    alpha = score
            elif score < beta:
                beta = score
            key = direction * score
            if key > best_key or (save_move and best_move is None):
                best_key = key
                best_score = score
                if save_move:
                    best_move = move
            index += 1
        return best_score, best_move

    def static_score(self, board: Board, winning_value: int) -> int:
        """Heuristic value of ``board`` for my color.

        Won positions score +-``winning_value`` and drawn ones 0; otherwise the
        score is my piece count minus the opponent's.
        """
        opponent = self.my_color.opposite()
        winner = board.get_winner()
        if winner is not None:
            if winner is self.my_color:
                return winning_value
            if winner is opponent:
                return -winning_value
            return 0
        return board.num_pieces(self.my_color) - board.num_pieces(opponent)

    def move_list(self, board: Board, color: PieceColor) -> List[str]:
        """Legal moves for ``color`` as 4-character strings.

        Sources are scanned column-major (a1, a2, ..., a7, b1, ...). Around each
        source the 5x5 neighbourhood is scanned column offset -2..2 outer, row
        offset -2..2 inner; the board's legality check rejects the center and
        anything off the grid.
        """
        sources = [(col, row) for col, row in iter_squares() if board.get(col, row) is color]
        moves: List[str] = []
        for col, row in sources:
            for dc in range(-2, 3):
                for dr in range(-2, 3):
                    col1, row1 = offset(col, row, dc, dr)
                    if board.legal_move(col, row, col1, row1):
                        moves.append(col + row + col1 + row1)
        return moves

    @staticmethod
    def _make_move(board: Board, move: str) -> Board:
        child = board.clone()
        child.make_move(*move)
        return child

    @staticmethod
    def _to_move(move: str) -> Move:
        return Move.move(*move)
