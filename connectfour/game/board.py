"""
board.py - Board representation and win detection for Connect Four

This module implements the Board class, a flat 42-cell vector of token
values with gravity drops, and the four-in-a-row checks that run through a
just-placed cell.
"""

import numpy as np
from typing import Iterable, List, Optional, Sequence

from connectfour.debug import debug
from connectfour.utils import (COLS, CELLS, CONNECT_N, REACH, Token, Axis,
                               check_token)
from connectfour.game.geometry import check_cell, check_column, window_starts


class Board:
    """
    Represents a Connect Four game board.

    Cells hold Token values (0 empty, +1 and -1 for the players) in row-major
    order. A column has room iff its top cell is empty. The move counter
    counts tokens dropped through drop() and makes the full-board check O(1).
    """

    def __init__(self):
        """Initialize an empty Connect Four board."""
        self.reset()

    def reset(self):
        """Reset the board to an empty state."""
        self.cells = np.zeros(CELLS, dtype=np.int8)
        self.move_count = 0

    @classmethod
    def from_cells(cls, values: Iterable[int]) -> 'Board':
        """
        Build a board from 42 cell values.

        Args:
            values: Row-major cell values, each in {-1, 0, 1}

        Returns:
            A new Board; the move counter is set to the number of tokens
        """
        cells = np.array(list(values), dtype=np.int64)
        if cells.shape != (CELLS,):
            raise ValueError(f"Expected {CELLS} cell values, got {cells.size}")
        if not np.isin(cells, (-1, 0, 1)).all():
            raise ValueError("Cell values must be -1, 0 or 1")

        board = cls()
        board.cells = cells.astype(np.int8)
        board.move_count = int(np.count_nonzero(board.cells))
        return board

    @classmethod
    def from_moves(cls, columns: Sequence[int], first: int = Token.ONE) -> 'Board':
        """
        Build a board by dropping tokens into columns, alternating players.

        Args:
            columns: Zero-based column indices in play order
            first: Token of the player making the first move
        """
        token = check_token(first)
        board = cls()
        for column in columns:
            board.drop(column, token)
            token = -token
        return board

    def copy(self) -> 'Board':
        """
        Create a copy of the board that can be mutated independently.

        Returns:
            A new Board instance with the same state
        """
        new_board = Board()
        new_board.cells = self.cells.copy()
        new_board.move_count = self.move_count
        return new_board

    def __getitem__(self, cell: int) -> int:
        return int(self.cells[check_cell(cell)])

    def __setitem__(self, cell: int, value: int):
        """Write a cell directly, without gravity; used for hypothetical moves."""
        self.cells[check_cell(cell)] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def is_valid_move(self, column: int) -> bool:
        """
        Check if a token can be dropped into a column.

        Args:
            column: The column to check (0-indexed)

        Returns:
            True if the column exists and has room, False otherwise
        """
        if not (0 <= column < COLS):
            return False
        return bool(self.cells[column] == Token.EMPTY)

    def get_valid_moves(self) -> List[int]:
        """
        Get a list of columns that still have room.

        Returns:
            List of valid column indices, in ascending order
        """
        return [col for col in range(COLS) if self.cells[col] == Token.EMPTY]

    def is_full(self) -> bool:
        """Check whether every cell has been filled by drop()."""
        return self.move_count >= CELLS

    def lowest_empty_cell(self, column: int) -> int:
        """
        Get the cell a token dropped into a column would land on.

        Args:
            column: The column to drop into (0-indexed)

        Returns:
            The index of the lowest empty cell in the column

        Raises:
            ValueError: If the column is out of range or full
        """
        check_column(column)
        if self.cells[column] != Token.EMPTY:
            raise ValueError(f"Column {column} is full")

        index = column
        for cell in range(column + COLS, CELLS, COLS):
            if self.cells[cell] != Token.EMPTY:
                break
            index = cell
        return index

    def drop(self, column: int, token: int) -> int:
        """
        Drop a token into a column.

        Args:
            column: The column to drop into (0-indexed)
            token: Token of the player moving

        Returns:
            The index of the cell the token landed on
        """
        token = check_token(token)
        cell = self.lowest_empty_cell(column)
        self.cells[cell] = token
        self.move_count += 1
        debug.debug(f"Token {Token(token)} dropped into column {column} at cell {cell}", "board")
        return cell

    def has_four_in_line(self, token: int, cell: int, axis: Axis) -> bool:
        """
        Check for four of a token in a row on one axis through a cell.

        A window wins iff its four values sum to 4 * token, which with cell
        values in {-1, 0, 1} only happens when all four hold that token.

        Args:
            token: Token to look for (+1 or -1)
            cell: Cell the line must pass through
            axis: Line family to check

        Returns:
            True if some window through the cell is four of the token
        """
        token = check_token(token)
        return self._winning_window(token, cell, axis) is not None

    def has_horizontal_four(self, token: int, cell: int) -> bool:
        return self.has_four_in_line(token, cell, Axis.HORIZONTAL)

    def has_vertical_four(self, token: int, cell: int) -> bool:
        return self.has_four_in_line(token, cell, Axis.VERTICAL)

    def has_diagonal_down_four(self, token: int, cell: int) -> bool:
        return self.has_four_in_line(token, cell, Axis.DIAGONAL_DOWN)

    def has_diagonal_up_four(self, token: int, cell: int) -> bool:
        return self.has_four_in_line(token, cell, Axis.DIAGONAL_UP)

    def check_win(self, token: int, cell: int) -> bool:
        """
        Check if a token placed at a cell completes four in a row.

        Args:
            token: Token of the player who just moved
            cell: Cell the token was placed on

        Returns:
            True if any axis through the cell holds four of the token
        """
        return any(self.has_four_in_line(token, cell, axis) for axis in Axis)

    def get_winning_line(self, token: int, cell: int) -> List[int]:
        """
        Get the cells of the first winning window through a cell.

        Returns:
            The four cell indices, or an empty list if there is no win
        """
        token = check_token(token)
        for axis in Axis:
            start = self._winning_window(token, cell, axis)
            if start is not None:
                return [start + k * axis.stride for k in range(CONNECT_N)]
        return []

    def _winning_window(self, token: int, cell: int, axis: Axis) -> Optional[int]:
        stride = axis.stride
        target = CONNECT_N * token
        for start in window_starts(cell, axis):
            window = self.cells[start:start + REACH * stride + 1:stride]
            if int(window.sum()) == target:
                return start
        return None
