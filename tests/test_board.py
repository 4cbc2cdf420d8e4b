"""
Unit Tests for Board Module

Tests for the Othello game state, focusing on:
    - Initial layout and opening moves
    - Sandwich rule in all 8 directions
    - Move application (flips, immutability, disc conservation)
    - Terminal detection and scoring
    - Text format and notation
"""

import random

import numpy as np
import pytest

from othello_engine.board import (
    BOARD_SIZE,
    Board,
    Cell,
    IllegalMoveError,
    Move,
    Outcome,
    Score,
    apply_move,
    initial_board,
    is_legal_move,
    is_terminal,
    legal_moves,
    moves_to_notation,
    score,
    winner,
)

EMPTY_ROW = "........"

# Dark to play (3,3): flips up (2,3),(1,3) and left (3,2). The ray to the
# right reaches an empty cell, the down-right ray runs off the board and
# the ray down meets a dark disc straight away.
MULTI_RAY = """
...X....
...O....
...O....
.XO.O...
...XO...
.....O..
......O.
.......O
"""

# Light can play (0,2) and (7,2); dark has no move at all.
DARK_STUCK = "\n".join(["OX......"] + [EMPTY_ROW] * 6 + ["OX......"])

FULL_TIE = "\n".join(["XXXXXXXX"] * 4 + ["OOOOOOOO"] * 4)


def random_positions(count, seed=0):
    """Boards and colors reached by random play (player to move can move)."""
    rng = random.Random(seed)
    positions = []
    while len(positions) < count:
        board = Board.initial()
        color = Cell.DARK
        for _ in range(rng.randint(1, 50)):
            moves = board.legal_moves(color)
            if not moves:
                if board.is_terminal():
                    break
                color = color.opponent
                continue
            move = rng.choice(moves)
            board = board.apply(move.row, move.col, color)
            color = color.opponent
        if board.has_any_move(color):
            positions.append((board, color))
    return positions


class TestInitialBoard:
    """Tests for the starting position."""

    def test_center_layout(self):
        """Test that the four center cells hold the alternating pattern."""
        board = Board.initial()

        assert board.get(3, 3) == Cell.LIGHT
        assert board.get(4, 4) == Cell.LIGHT
        assert board.get(3, 4) == Cell.DARK
        assert board.get(4, 3) == Cell.DARK
        assert board.occupied == 4, "Only the center should be occupied"
        assert board.score() == Score(dark=2, light=2)

    def test_dark_opening_moves(self):
        """Test that dark has exactly the 4 opening moves in row-major order."""
        board = initial_board()

        moves = legal_moves(board, Cell.DARK)

        assert moves == [(2, 3), (3, 2), (4, 5), (5, 4)]
        assert moves_to_notation(moves) == "d3 c4 f5 e6"

    def test_light_opening_moves(self):
        """Test that light's opening moves mirror dark's."""
        board = Board.initial()

        assert board.legal_moves(Cell.LIGHT) == [(2, 4), (3, 5), (4, 2), (5, 3)]

    def test_initial_is_not_terminal(self):
        board = Board.initial()

        assert not board.is_terminal()
        assert not is_terminal(board)
        assert board.winner() == Outcome.TIE


class TestLegality:
    """Tests for the sandwich rule."""

    def test_occupied_cell_is_illegal(self):
        board = Board.initial()

        assert not board.is_legal_move(3, 3, Cell.DARK)
        assert not is_legal_move(board, 3, 4, Cell.LIGHT)

    def test_off_board_is_illegal(self):
        board = Board.initial()

        for row, col in [(-1, 0), (0, -1), (8, 0), (0, 8), (8, 8)]:
            assert not board.is_legal_move(row, col, Cell.DARK), f"({row}, {col}) is off the board"

    def test_empty_is_not_a_player(self):
        board = Board.initial()

        with pytest.raises(ValueError):
            board.is_legal_move(2, 3, Cell.EMPTY)

        with pytest.raises(ValueError):
            board.legal_moves(Cell.EMPTY)

    def test_ray_running_off_board_is_invalid(self):
        """Opponent discs up to the edge do not make a sandwich."""
        board = Board.from_string("\n".join([".OOOOOOO"] + [EMPTY_ROW] * 7))

        assert not board.is_legal_move(0, 0, Cell.DARK)

    def test_adjacent_own_disc_is_invalid(self):
        """Reaching an own disc with no opponent disc in between is not a capture."""
        board = Board.from_string("\n".join([".XO....."] + [EMPTY_ROW] * 7))

        assert not board.is_legal_move(0, 0, Cell.DARK)
        assert board.is_legal_move(0, 0, Cell.LIGHT), "Light sandwiches the dark disc"

    def test_each_direction(self):
        """Test that a capture is found along every one of the 8 directions."""
        for dr, dc in [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]:
            grid = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
            grid[3 + dr][3 + dc] = Cell.LIGHT
            grid[3 + 2 * dr][3 + 2 * dc] = Cell.DARK
            board = Board(grid)

            assert board.is_legal_move(3, 3, Cell.DARK), f"Direction ({dr}, {dc}) should capture"
            assert board.flips(3, 3, Cell.DARK) == [(3 + dr, 3 + dc)]

    def test_legal_moves_match_flips(self):
        """Every legal move flips something; every other empty cell flips nothing."""
        for board, color in random_positions(15, seed=3):
            moves = set(board.legal_moves(color))
            for row in range(BOARD_SIZE):
                for col in range(BOARD_SIZE):
                    flipped = board.flips(row, col, color)
                    if (row, col) in moves:
                        assert flipped, f"Legal move ({row}, {col}) flips nothing"
                    else:
                        assert not flipped, f"Non-move ({row}, {col}) flips {flipped}"

    def test_legal_moves_returns_copy(self):
        board = Board.initial()

        moves = board.legal_moves(Cell.DARK)
        moves.clear()

        assert len(board.legal_moves(Cell.DARK)) == 4, "Cached moves should not be exposed"


class TestApply:
    """Tests for move application."""

    def test_opening_move_flips_one_disc(self):
        """Dark d3 flips d4 and scores 4-1."""
        board = Board.initial()

        after = apply_move(board, 2, 3, Cell.DARK)

        assert after.get(2, 3) == Cell.DARK
        assert after.get(3, 3) == Cell.DARK, "d4 should flip to dark"
        assert score(after) == Score(dark=4, light=1)

    def test_apply_does_not_mutate_input(self):
        board = Board.initial()
        before = board.to_string()

        board.apply(2, 3, Cell.DARK)

        assert board.to_string() == before, "Input board must be unchanged"
        assert board == Board.initial()

    def test_multiple_rays(self):
        """Only the sandwiched rays flip."""
        board = Board.from_string(MULTI_RAY)

        flipped = board.flips(3, 3, Cell.DARK)
        after = board.apply(3, 3, Cell.DARK)

        assert flipped == [(2, 3), (1, 3), (3, 2)]
        for row, col in flipped:
            assert after.get(row, col) == Cell.DARK
        assert after.get(3, 4) == Cell.LIGHT, "Ray ending on an empty cell must not flip"
        assert after.get(4, 4) == Cell.LIGHT, "Ray running off the board must not flip"
        assert after.get(7, 7) == Cell.LIGHT
        assert board.score() == Score(dark=3, light=8)
        assert after.score() == Score(dark=7, light=5)

    def test_illegal_move_raises(self):
        board = Board.initial()

        with pytest.raises(IllegalMoveError) as excinfo:
            board.apply(0, 0, Cell.DARK)

        assert excinfo.value.row == 0
        assert excinfo.value.col == 0
        assert excinfo.value.color == Cell.DARK
        assert board == Board.initial(), "Failed apply must not touch the board"

    def test_occupied_move_raises(self):
        board = Board.initial()

        with pytest.raises(ValueError):
            board.apply(3, 3, Cell.DARK)

    def test_disc_count_grows_by_one(self):
        """Total occupied cells increase by exactly one per move."""
        for board, color in random_positions(20, seed=5):
            for move in board.legal_moves(color):
                flipped = set(board.flips(move.row, move.col, color))
                after = board.apply(move.row, move.col, color)

                assert after.occupied == board.occupied + 1
                assert after.count(color) == board.count(color) + 1 + len(flipped)

                for row in range(BOARD_SIZE):
                    for col in range(BOARD_SIZE):
                        if (row, col) == move or (row, col) in flipped:
                            assert after.get(row, col) == color
                        else:
                            assert after.get(row, col) == board.get(row, col), (
                                f"({row}, {col}) changed without being flipped"
                            )

    def test_random_games_reach_terminal(self):
        """Random games end with both players stuck and never exceed 64 discs."""
        rng = random.Random(11)
        for _ in range(5):
            board = Board.initial()
            color = Cell.DARK
            occupied = board.occupied
            while not board.is_terminal():
                moves = board.legal_moves(color)
                if moves:
                    move = rng.choice(moves)
                    board = board.apply(move.row, move.col, color)
                    assert board.occupied == occupied + 1
                    occupied = board.occupied
                color = color.opponent

            assert board.occupied <= 64
            assert not board.legal_moves(Cell.DARK)
            assert not board.legal_moves(Cell.LIGHT)


class TestTerminal:
    """Tests for terminal detection and winners."""

    def test_stuck_player_is_not_terminal(self):
        """A player without moves passes; the game continues."""
        board = Board.from_string(DARK_STUCK)

        assert not board.has_any_move(Cell.DARK)
        assert board.has_any_move(Cell.LIGHT)
        assert not board.is_terminal()
        assert not board.is_terminal(Cell.DARK), "Both colors must be checked"

    def test_single_color_board_is_terminal(self):
        board = Board.from_string("\n".join(["X......."] + [EMPTY_ROW] * 7))

        assert board.is_terminal()
        assert winner(board) == Outcome.DARK

    def test_full_board_tie(self):
        board = Board.from_string(FULL_TIE)

        assert board.is_terminal()
        assert board.score() == Score(dark=32, light=32)
        assert board.winner() == Outcome.TIE

    def test_light_wins_with_more_discs(self):
        board = Board.from_string("\n".join(["XXXXXXXX"] * 3 + ["OOOOOOOO"] * 5))

        assert board.winner() == Outcome.LIGHT

    def test_terminal_iff_no_moves_for_both(self):
        for board, _ in random_positions(20, seed=8):
            both_stuck = not board.legal_moves(Cell.DARK) and not board.legal_moves(Cell.LIGHT)
            assert board.is_terminal() == both_stuck


class TestTextFormat:
    """Tests for parsing, rendering and notation."""

    def test_round_trip(self):
        board = Board.initial().apply(2, 3, Cell.DARK)

        assert Board.from_string(board.to_string()) == board

    def test_str_has_coordinates(self):
        text = str(Board.initial())

        assert text.splitlines()[0].split() == list("abcdefgh")
        assert text.splitlines()[4] == "4 . . . O X . . ."

    def test_unknown_symbol(self):
        with pytest.raises(ValueError):
            Board.from_string("\n".join(["Z......."] + [EMPTY_ROW] * 7))

    def test_wrong_cell_count(self):
        with pytest.raises(ValueError):
            Board.from_string("\n".join([EMPTY_ROW] * 7))

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            Board([[0] * 8] * 7)

        with pytest.raises(ValueError):
            Board([[0] * 9] * 8)

    def test_invalid_cell_value(self):
        with pytest.raises(ValueError):
            Board([[3] * 8] * 8)

    def test_notation(self):
        assert Move(2, 3).notation == "d3"
        assert Move.from_notation("d3") == Move(2, 3)
        assert Move.from_notation(" H8 ") == Move(7, 7)
        assert Move.from_notation("a1") == Move(0, 0)

    @pytest.mark.parametrize("text", ["", "d", "d0", "d9", "i1", "33", "d10"])
    def test_invalid_notation(self, text):
        with pytest.raises(ValueError):
            Move.from_notation(text)


class TestValueSemantics:
    """Tests that boards behave as immutable values."""

    def test_equal_boards_hash_equal(self):
        a = Board.initial().apply(2, 3, Cell.DARK)
        b = Board.initial().apply(2, 3, Cell.DARK)

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_cells_cannot_be_replaced(self):
        board = Board.initial()

        with pytest.raises(AttributeError):
            board._cells = ()

    def test_array_is_read_only(self):
        array = Board.initial().to_array()

        assert array.shape == (8, 8)
        assert array.dtype == np.int8
        assert array[3, 3] == Cell.LIGHT
        with pytest.raises(ValueError):
            array[0, 0] = 1

    def test_opponent(self):
        assert Cell.DARK.opponent is Cell.LIGHT
        assert Cell.LIGHT.opponent is Cell.DARK
        with pytest.raises(ValueError):
            Cell.EMPTY.opponent
