"""
Tests for the Board class.

Covers gravity drops, validation, copying and four-in-a-row detection on
every axis, including the board edges.
"""

import numpy as np
import pytest

from connectfour.utils import Axis, Token
from connectfour.game.board import Board
from connectfour.game.geometry import windows


def board_with(ones=(), twos=()):
    """Build a board with +1 tokens on `ones` and -1 tokens on `twos`."""
    cells = [0] * 42
    for cell in ones:
        cells[cell] = 1
    for cell in twos:
        cells[cell] = -1
    return Board.from_cells(cells)


class TestBoardState:
    """Test construction and basic state."""

    def test_empty_board(self):
        board = Board()
        assert board.cells.shape == (42,)
        assert not board.cells.any()
        assert board.move_count == 0
        assert board.get_valid_moves() == list(range(7))
        assert not board.is_full()

    def test_from_cells(self):
        board = board_with(ones=[35, 36], twos=[38])
        assert board[35] == 1
        assert board[38] == -1
        assert board.move_count == 3

    def test_from_cells_validation(self):
        """Test that malformed cell lists are rejected."""
        with pytest.raises(ValueError):
            Board.from_cells([0] * 41)
        with pytest.raises(ValueError):
            Board.from_cells([2] + [0] * 41)

    def test_from_moves(self):
        board = Board.from_moves([3, 3, 4])
        assert board[38] == Token.ONE
        assert board[31] == Token.TWO
        assert board[39] == Token.ONE
        assert board.move_count == 3

    def test_copy_is_independent(self):
        board = Board.from_moves([3])
        clone = board.copy()
        clone.drop(0, Token.TWO)
        assert clone != board
        assert board[35] == Token.EMPTY
        assert board.move_count == 1

    def test_reset(self):
        board = Board.from_moves([0, 1, 2])
        board.reset()
        assert board == Board()
        assert board.move_count == 0

    def test_cell_access_checks_range(self):
        board = Board()
        with pytest.raises(ValueError):
            board[42]
        with pytest.raises(ValueError):
            board[-1] = 1

    def test_full_board(self, draw_cells):
        board = Board.from_cells(draw_cells)
        assert board.is_full()
        assert board.get_valid_moves() == []


class TestDrop:
    """Test gravity drops."""

    def test_tokens_stack_upwards(self):
        board = Board()
        assert board.drop(3, Token.ONE) == 38
        assert board.drop(3, Token.TWO) == 31
        assert board.lowest_empty_cell(3) == 24
        assert board.move_count == 2

    def test_full_column(self):
        """Test that a column with a filled top cell takes no more tokens."""
        board = Board.from_moves([2] * 6)
        assert not board.is_valid_move(2)
        assert 2 not in board.get_valid_moves()
        with pytest.raises(ValueError):
            board.lowest_empty_cell(2)
        with pytest.raises(ValueError):
            board.drop(2, Token.ONE)

    def test_invalid_column(self):
        board = Board()
        assert not board.is_valid_move(7)
        assert not board.is_valid_move(-1)
        with pytest.raises(ValueError):
            board.drop(7, Token.ONE)

    def test_invalid_token(self):
        with pytest.raises(ValueError):
            Board().drop(0, 0)

    def test_valid_move_is_plain_bool(self):
        assert Board().is_valid_move(0) is True


class TestWinDetection:
    """Test four-in-a-row checks through a cell."""

    def test_vertical_four_completes_on_fourth_drop(self):
        board = Board()
        cells = [board.drop(3, Token.ONE) for _ in range(3)]
        assert cells == [38, 31, 24]
        assert not board.has_vertical_four(Token.ONE, 24)
        last = board.drop(3, Token.ONE)
        assert last == 17
        assert board.has_vertical_four(Token.ONE, last)
        assert board.check_win(Token.ONE, last)
        assert not board.check_win(Token.TWO, last)

    def test_horizontal_four(self):
        board = board_with(ones=[35, 36, 37, 38])
        assert board.has_horizontal_four(Token.ONE, 36)
        assert board.get_winning_line(Token.ONE, 37) == [35, 36, 37, 38]

    def test_horizontal_four_at_right_edge(self):
        board = board_with(twos=[38, 39, 40, 41])
        assert board.has_horizontal_four(Token.TWO, 41)
        assert board.get_winning_line(Token.TWO, 41) == [38, 39, 40, 41]

    def test_no_wrap_across_rows(self):
        """Test that four consecutive indices split over two rows are no line."""
        board = board_with(ones=[33, 34, 35, 36])
        for cell in (33, 34, 35, 36):
            assert not board.check_win(Token.ONE, cell)

    def test_diagonal_down_four(self):
        board = board_with(ones=[14, 22, 30, 38])
        assert board.has_diagonal_down_four(Token.ONE, 22)
        assert not board.has_diagonal_up_four(Token.ONE, 22)

    def test_diagonal_up_four(self):
        board = board_with(twos=[20, 26, 32, 38])
        assert board.has_diagonal_up_four(Token.TWO, 32)
        assert board.get_winning_line(Token.TWO, 20) == [20, 26, 32, 38]

    def test_three_is_not_a_win(self):
        board = board_with(ones=[35, 36, 37], twos=[38])
        assert not board.check_win(Token.ONE, 37)
        assert board.get_winning_line(Token.ONE, 37) == []

    def test_mixed_window_is_not_a_win(self):
        board = board_with(ones=[35, 36, 38, 39], twos=[37])
        for axis in Axis:
            assert not board.has_four_in_line(Token.ONE, 36, axis)

    def test_full_board_without_winner(self, draw_cells):
        board = Board.from_cells(draw_cells)
        for cell in range(42):
            assert not board.check_win(board[cell], cell)


class TestStorage:
    """Test the cell storage type."""

    def test_cells_stay_int8(self):
        board = Board.from_moves([1, 2])
        assert board.cells.dtype == np.int8
        assert board.copy().cells.dtype == np.int8


class TestExhaustiveLines:
    """Build every possible four-in-a-row on an empty board."""

    def test_every_window_on_every_axis(self):
        checked = 0
        for axis in Axis:
            starts = {window for cell in range(42) for window in windows(cell, axis)}
            for window in starts:
                board = board_with(twos=window)
                for cell in window:
                    assert board.has_four_in_line(Token.TWO, cell, axis)
                    assert not board.has_four_in_line(Token.ONE, cell, axis)
                    for other in Axis:
                        if other is not axis:
                            assert not board.has_four_in_line(Token.TWO, cell, other)
                checked += 1
        # 24 rows, 21 columns, 12 of each diagonal
        assert checked == 69
