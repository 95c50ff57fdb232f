"""CLI entrypoint for playing Ataxx against the AI."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

from ai.base_ai import BaseAI
from ai.config import SearchConfig
from ai.human import HumanPlayer, QuitGame
from ai.minimax_ai import MinimaxAI
from engine.board import Board
from engine.pieces import PieceColor


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Ataxx in terminal.")
    parser.add_argument("--depth", type=int, default=None, help="Minimax depth (overrides --config)")
    parser.add_argument("--config", type=str, default=None, help="Path to search config JSON")
    parser.add_argument("--red", type=str, default="human", choices=["human", "ai"], help="Who plays red")
    parser.add_argument("--blue", type=str, default="ai", choices=["human", "ai"], help="Who plays blue")
    parser.add_argument(
        "--blocks",
        type=str,
        nargs="*",
        default=[],
        help="Squares to block, e.g. c3 (mirror images are blocked too)",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def build_player(kind: str, depth: int) -> BaseAI:
    if kind == "ai":
        return MinimaxAI(depth=depth)
    if kind == "human":
        return HumanPlayer()
    raise ValueError(f"Unsupported player type: {kind}")


def play_game(board: Board, players: Dict[PieceColor, BaseAI]) -> PieceColor:
    """Alternate turns until the board reports a winner, then return it."""
    logger = logging.getLogger("ataxx.cli")
    while True:
        winner = board.get_winner()
        print()
        print(board.render_ascii())
        if winner is not None:
            return winner

        color = board.whose_move
        player = players[color]
        move = player.choose_move(board, color)
        board.apply_move(move)
        if player.is_auto:
            print(f"* {color.value} plays {move}")
        logger.debug("%s moved %s, red=%d blue=%d", color.value, move,
                     board.num_pieces(PieceColor.RED), board.num_pieces(PieceColor.BLUE))


def run_cli(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("ataxx.cli")

    config = SearchConfig.from_json(args.config) if args.config else SearchConfig()
    depth = args.depth if args.depth is not None else config.max_depth

    board = Board()
    for square in args.blocks:
        if len(square) != 2:
            raise SystemExit(f"Invalid block square: {square}")
        try:
            board.set_block(square[0], square[1])
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

    players = {
        PieceColor.RED: build_player(args.red, depth),
        PieceColor.BLUE: build_player(args.blue, depth),
    }
    logger.info("Starting Ataxx game. Red=%s Blue=%s depth=%d", args.red, args.blue, depth)
    print("Moves: <col><row><col><row> (e.g. a7b6) | help | quit")

    try:
        winner = play_game(board, players)
    except (QuitGame, EOFError):
        print("Exiting game.")
        return

    if winner is PieceColor.EMPTY:
        print("Game ended in draw.")
    else:
        print(f"Winner: {winner.value}")


if __name__ == "__main__":
    run_cli()
