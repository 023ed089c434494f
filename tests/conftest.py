"""Shared fixtures for the Connect Four tests."""

import pytest

from connectfour.utils import ROWS, COLS


def draw_pattern():
    """
    Cell values of a full board with no four in a row.

    Rows alternate X and O, and each pair of rows flips the starting token.
    """
    return [(1 if row % 4 < 2 else -1) * (1 if col % 2 == 0 else -1)
            for row in range(ROWS) for col in range(COLS)]


@pytest.fixture
def draw_cells():
    return draw_pattern()


@pytest.fixture
def single_open_column_cells():
    """A board with only column 6 empty and no winner."""
    cells = draw_pattern()
    for row in range(ROWS):
        cells[row * COLS + 6] = 0
    return cells
