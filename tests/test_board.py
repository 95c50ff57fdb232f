"""Tests for the Ataxx board model and rules."""

import pytest

from engine.board import PASS_MARKER, Board, Move
from engine.pieces import PieceColor
from engine.rules import JUMP_LIMIT, distance, in_bounds, neighbors, reflections


class TestRules:
    def test_in_bounds(self):
        assert in_bounds("a", "1")
        assert in_bounds("g", "7")
        assert not in_bounds("h", "1")
        assert not in_bounds("`", "1")
        assert not in_bounds("a", "0")
        assert not in_bounds("a", "8")

    def test_distance_is_chebyshev(self):
        assert distance("a", "1", "b", "2") == 1
        assert distance("a", "1", "c", "2") == 2
        assert distance("a", "1", "a", "4") == 3

    def test_corner_has_three_neighbors(self):
        assert sorted(neighbors("a", "1")) == [("a", "2"), ("b", "1"), ("b", "2")]

    def test_reflections(self):
        assert sorted(reflections("c", "3")) == [("c", "3"), ("c", "5"), ("e", "3"), ("e", "5")]
        assert reflections("d", "4") == [("d", "4")]


class TestMove:
    def test_encoding(self):
        move = Move.move("a", "7", "b", "6")
        assert str(move) == "a7b6"
        assert Move.parse("a7b6") == move
        assert Move.parse("a7-b6") == move

    def test_pass_marker(self):
        assert str(Move.pass_move()) == PASS_MARKER
        assert Move.parse("-").is_pass

    def test_extend_and_jump(self):
        assert Move.parse("a7a6").is_extend
        assert Move.parse("a7a5").is_jump
        assert not Move.pass_move().is_jump

    @pytest.mark.parametrize("text", ["", "a7b", "a7b6c", "h1a1", "a0a1", "zz11"])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            Move.parse(text)


class TestBoard:
    def test_initial_position(self):
        board = Board()
        assert board.whose_move is PieceColor.RED
        assert board.get("a", "7") is PieceColor.RED
        assert board.get("g", "1") is PieceColor.RED
        assert board.get("a", "1") is PieceColor.BLUE
        assert board.get("g", "7") is PieceColor.BLUE
        assert board.num_pieces(PieceColor.RED) == 2
        assert board.num_pieces(PieceColor.BLUE) == 2
        assert board.num_pieces(PieceColor.EMPTY) == 45
        assert board.get_winner() is None

    def test_get_off_board_raises(self):
        with pytest.raises(ValueError):
            Board().get("h", "1")

    def test_extend(self):
        board = Board()
        board.make_move("a", "7", "a", "6")
        assert board.get("a", "7") is PieceColor.RED
        assert board.get("a", "6") is PieceColor.RED
        assert board.num_jumps == 0
        assert board.whose_move is PieceColor.BLUE

    def test_jump_vacates_source(self):
        board = Board()
        board.make_move("a", "7", "a", "5")
        assert board.get("a", "7") is PieceColor.EMPTY
        assert board.get("a", "5") is PieceColor.RED
        assert board.num_jumps == 1
        board.make_move("a", "1", "b", "2")
        assert board.num_jumps == 0

    def test_adjacent_opponents_flip(self, make_board):
        board = make_board(red=["c3"], blue=["d4", "d5", "e5"])
        board.make_move("c", "3", "c", "4")
        assert board.get("d", "4") is PieceColor.RED
        assert board.get("d", "5") is PieceColor.RED
        assert board.get("e", "5") is PieceColor.BLUE
        assert board.num_pieces(PieceColor.RED) == 4
        assert board.num_pieces(PieceColor.BLUE) == 1

    @pytest.mark.parametrize(
        "move",
        [
            ("a", "1", "a", "2"),  # opponent's piece
            ("a", "7", "a", "7"),  # no movement
            ("a", "7", "a", "4"),  # too far
            ("a", "7", "`", "7"),  # off the board
            ("a", "7", "a", "9"),
        ],
    )
    def test_illegal_moves(self, move):
        board = Board()
        assert not board.legal_move(*move)
        with pytest.raises(ValueError):
            board.make_move(*move)

    def test_destination_must_be_empty(self, make_board):
        board = make_board(red=["a1"], blue=["a2"], blocked=["b2"])
        assert not board.legal_move("a", "1", "a", "2")
        assert not board.legal_move("a", "1", "b", "2")
        assert board.legal_move("a", "1", "b", "1")

    def test_clone_is_independent(self):
        board = Board()
        clone = board.clone()
        assert clone == board
        clone.make_move("a", "7", "b", "6")
        assert clone != board
        assert board.get("b", "6") is PieceColor.EMPTY
        assert board.whose_move is PieceColor.RED

    def test_set_block_reflects(self):
        board = Board()
        board.set_block("c", "3")
        for col, row in (("c", "3"), ("e", "3"), ("c", "5"), ("e", "5")):
            assert board.get(col, row) is PieceColor.BLOCKED
        assert board.num_pieces(PieceColor.BLOCKED) == 4

    def test_set_block_on_piece_raises(self):
        board = Board()
        with pytest.raises(ValueError):
            board.set_block("a", "1")
        assert board.num_pieces(PieceColor.BLOCKED) == 0

    def test_can_move_ignores_turn(self, stuck_red):
        assert not stuck_red.can_move(PieceColor.RED)
        assert stuck_red.can_move(PieceColor.BLUE)

    def test_pass(self, stuck_red):
        assert stuck_red.legal(Move.pass_move())
        stuck_red.apply_move(Move.pass_move())
        assert stuck_red.whose_move is PieceColor.BLUE
        assert stuck_red.legal_move("g", "7", "g", "6")

    def test_pass_when_able_to_move_raises(self):
        board = Board()
        assert not board.legal(Move.pass_move())
        with pytest.raises(ValueError):
            board.apply_move(Move.pass_move())

    def test_stuck_side_game_continues(self, stuck_red):
        assert not stuck_red.legal_move("a", "1", "a", "2")
        assert stuck_red.get_winner() is None


class TestWinner:
    def test_side_without_pieces_loses(self, make_board):
        assert make_board(red=["a1"]).get_winner() is PieceColor.RED
        assert make_board(blue=["a1"]).get_winner() is PieceColor.BLUE

    def test_capturing_last_piece_wins(self, make_board):
        board = make_board(red=["c3"], blue=["d4"])
        assert board.get_winner() is None
        board.make_move("c", "3", "c", "4")
        assert board.get_winner() is PieceColor.RED

    def test_jump_limit_ends_game(self, make_board):
        board = make_board(red=["a1", "a2"], blue=["g7"])
        board.num_jumps = JUMP_LIMIT
        assert board.get_winner() is PieceColor.RED

    def test_tie_is_empty(self, make_board):
        board = make_board(red=["a1"], blue=["g7"])
        board.num_jumps = JUMP_LIMIT
        assert board.get_winner() is PieceColor.EMPTY

    def test_nobody_can_move(self, make_board):
        walls_a1 = ["a2", "a3", "b1", "b2", "b3", "c1", "c2", "c3"]
        walls_g7 = ["g6", "g5", "f7", "f6", "f5", "e7", "e6", "e5"]
        board = make_board(red=["a1"], blue=["g7"], blocked=walls_a1 + walls_g7)
        assert board.get_winner() is PieceColor.EMPTY
