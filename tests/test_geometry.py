"""Tests for the board index arithmetic and the shared enumerations."""

import pytest

from connectfour.utils import OUT_OF_BOUNDS, Axis, Direction, Token, Difficulty, check_token
from connectfour.game.geometry import (check_cell, check_column, steps_to_edge, step,
                                       is_top_row, row_bounds, column_bounds, diagonal_bounds,
                                       line_cells, scan_window_limits, windows)


class TestEnumerations:
    """Test directions, axes and tokens."""

    def test_direction_offsets(self):
        """Test flat index offsets of the compass directions."""
        assert Direction.UP.offset == -7
        assert Direction.RIGHT.offset == 1
        assert Direction.DOWN_RIGHT.offset == 8
        assert Direction.DOWN_LEFT.offset == 6

    def test_direction_opposite_and_axis(self):
        """Test that opposite directions share an axis."""
        for direction in Direction:
            assert direction.opposite.opposite is direction
            assert direction.opposite.axis is direction.axis
        assert Direction.UP_RIGHT.axis is Axis.DIAGONAL_UP

    def test_axis_strides(self):
        """Test index distance between neighbours on each axis."""
        assert Axis.HORIZONTAL.stride == 1
        assert Axis.VERTICAL.stride == 7
        assert Axis.DIAGONAL_DOWN.stride == 8
        assert Axis.DIAGONAL_UP.stride == 6

    def test_token_other(self):
        """Test the opposing token."""
        assert Token.ONE.other() == Token.TWO
        assert Token.TWO.other() == Token.ONE
        assert Token.EMPTY.other() == Token.EMPTY

    def test_check_token(self):
        """Test that only +1 and -1 are player tokens."""
        assert check_token(-1) == -1
        for value in (0, 2, -2):
            with pytest.raises(ValueError):
                check_token(value)

    def test_difficulty_labels(self):
        """Test the display names of the difficulty tiers."""
        assert [d.label for d in Difficulty] == ["Random", "Easy", "Normal", "Advanced"]


class TestValidation:
    """Test cell and column range checks."""

    def test_cell_range(self):
        assert check_cell(0) == 0
        assert check_cell(41) == 41
        with pytest.raises(ValueError):
            check_cell(42)
        with pytest.raises(ValueError):
            check_cell(-1)

    def test_column_range(self):
        assert check_column(6) == 6
        with pytest.raises(ValueError):
            check_column(7)
        with pytest.raises(ValueError):
            check_column(-1)


class TestStep:
    """Test walking from a cell in a direction."""

    def test_step_inside_board(self):
        """Test steps that stay on the board."""
        assert step(38, 1, Direction.UP) == 31
        assert step(38, 3, Direction.LEFT) == 35
        assert step(0, 2, Direction.DOWN_RIGHT) == 16
        assert step(38, 0, Direction.UP) == 38

    def test_step_off_board(self):
        """Test that leaving the board gives OUT_OF_BOUNDS."""
        assert step(3, 1, Direction.UP) == OUT_OF_BOUNDS
        assert step(35, 1, Direction.LEFT) == OUT_OF_BOUNDS
        assert step(6, 1, Direction.RIGHT) == OUT_OF_BOUNDS
        assert step(41, 1, Direction.DOWN_LEFT) == OUT_OF_BOUNDS

    def test_no_wrap_between_rows(self):
        """Test that a step right from the last column does not reach the next row."""
        assert step(13, 1, Direction.RIGHT) == OUT_OF_BOUNDS
        assert step(14, 1, Direction.UP_LEFT) == OUT_OF_BOUNDS

    def test_negative_steps(self):
        with pytest.raises(ValueError):
            step(20, -1, Direction.UP)

    def test_steps_to_edge(self):
        assert steps_to_edge(0, Direction.DOWN_RIGHT) == 5
        assert steps_to_edge(6, Direction.DOWN_LEFT) == 5
        assert steps_to_edge(38, Direction.DOWN) == 0

    def test_is_top_row(self):
        assert is_top_row(3)
        assert not is_top_row(10)


class TestLineBounds:
    """Test line end points through a cell."""

    def test_row_and_column(self):
        assert row_bounds(38) == (35, 41)
        assert column_bounds(38) == (3, 38)

    def test_diagonals(self):
        """Test that each side of a diagonal is clipped on its own."""
        assert diagonal_bounds(38, Axis.DIAGONAL_DOWN) == (14, 38)
        assert diagonal_bounds(38, Axis.DIAGONAL_UP) == (20, 38)
        assert diagonal_bounds(0, Axis.DIAGONAL_DOWN) == (0, 40)

    def test_diagonal_bounds_rejects_straight_axes(self):
        with pytest.raises(ValueError):
            diagonal_bounds(38, Axis.HORIZONTAL)

    def test_line_cells(self):
        assert line_cells(3, Axis.VERTICAL) == [3, 10, 17, 24, 31, 38]
        assert line_cells(24, Axis.DIAGONAL_UP) == [6, 12, 18, 24, 30, 36]
        assert line_cells(20, Axis.DIAGONAL_UP) == [20, 26, 32, 38]


class TestWindows:
    """Test enumeration of four-cell windows through a cell."""

    def test_scan_limits(self):
        """Test that the scan reaches three cells each way, clipped to the edge."""
        assert scan_window_limits(38, Direction.LEFT) == (35, 41)
        assert scan_window_limits(38, Axis.HORIZONTAL) == (35, 41)
        assert scan_window_limits(0, Axis.HORIZONTAL) == (0, 3)
        assert scan_window_limits(24, Axis.VERTICAL) == (3, 38)

    def test_corner_windows(self):
        assert list(windows(35, Axis.HORIZONTAL)) == [(35, 36, 37, 38)]
        assert list(windows(0, Axis.DIAGONAL_DOWN)) == [(0, 8, 16, 24)]
        assert list(windows(0, Axis.DIAGONAL_UP)) == []

    def test_center_window_count(self):
        """Test that a middle cell of the bottom row sits in four row windows."""
        assert len(list(windows(38, Axis.HORIZONTAL))) == 4
        assert list(windows(38, Axis.VERTICAL)) == [(17, 24, 31, 38)]

    def test_every_window_contains_cell(self):
        for cell in range(42):
            for axis in Axis:
                for window in windows(cell, axis):
                    assert cell in window
                    assert len(window) == 4


class TestExhaustive:
    """Check limits and line families for every cell."""

    def test_scan_limits_for_every_direction(self):
        """Test that each side reaches min(3, distance to edge) steps."""
        for cell in range(42):
            for direction in Direction:
                lower, upper = scan_window_limits(cell, direction)
                axis = direction.axis
                assert 0 <= lower <= cell <= upper < 42
                assert (cell - lower) // axis.stride == min(3, steps_to_edge(cell, axis.lower))
                assert (upper - cell) // axis.stride == min(3, steps_to_edge(cell, axis.upper))

    def test_lines_partition_board(self):
        """Test that every axis splits the board into disjoint lines."""
        expected_lengths = {
            Axis.HORIZONTAL: {7},
            Axis.VERTICAL: {6},
            Axis.DIAGONAL_DOWN: {1, 2, 3, 4, 5, 6},
            Axis.DIAGONAL_UP: {1, 2, 3, 4, 5, 6},
        }
        for axis in Axis:
            lines = {tuple(line_cells(cell, axis)) for cell in range(42)}
            covered = [cell for line in lines for cell in line]
            assert sorted(covered) == list(range(42))
            assert {len(line) for line in lines} == expected_lengths[axis]
