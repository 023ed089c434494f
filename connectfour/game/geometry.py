"""
geometry.py - Index arithmetic for the flat 42-cell Connect Four board

Cells are numbered row-major with stride COLS, so cell r * 7 + c is row r
(0 at the top) and column c. Every function here is pure and works only on
indices; reading cell values is left to the Board.

Each direction is clipped independently against the board edges, since
edge and corner cells have lines of different lengths on either side.
"""

from typing import Iterator, List, Tuple, Union

from connectfour.utils import (ROWS, COLS, CELLS, REACH, OUT_OF_BOUNDS,
                               Axis, Direction)


def check_cell(cell: int) -> int:
    """
    Validate a cell index.

    Raises:
        ValueError: If the index is outside 0..41
    """
    if not 0 <= cell < CELLS:
        raise ValueError(f"Cell index must be in 0..{CELLS - 1}, got {cell}")
    return cell


def check_column(column: int) -> int:
    """
    Validate a column index.

    Raises:
        ValueError: If the column is outside 0..6
    """
    if not 0 <= column < COLS:
        raise ValueError(f"Column must be in 0..{COLS - 1}, got {column}")
    return column


def steps_to_edge(cell: int, direction: Direction) -> int:
    """
    Count how many steps can be taken from a cell before leaving the board.

    Args:
        cell: Reference cell index
        direction: Direction of travel

    Returns:
        Number of whole steps that stay on the board
    """
    row, col = divmod(check_cell(cell), COLS)
    limits = []
    if direction.d_row < 0:
        limits.append(row)
    elif direction.d_row > 0:
        limits.append(ROWS - 1 - row)
    if direction.d_col < 0:
        limits.append(col)
    elif direction.d_col > 0:
        limits.append(COLS - 1 - col)
    return min(limits)


def edge_limit(cell: int, direction: Direction) -> int:
    """Get the last on-board cell reached by walking from a cell in a direction."""
    return cell + steps_to_edge(cell, direction) * direction.offset


def reach_limit(cell: int, direction: Direction) -> int:
    """
    Get the furthest cell within REACH steps of a cell, clipped to the board.

    This is the end of the range any window containing the cell can extend
    to in that direction.
    """
    steps = min(REACH, steps_to_edge(cell, direction))
    return cell + steps * direction.offset


def step(cell: int, steps: int, direction: Direction) -> int:
    """
    Get the cell a number of steps away from a reference cell.

    Args:
        cell: Reference cell index
        steps: Distance from the reference cell
        direction: Direction from the reference cell

    Returns:
        The cell index, or OUT_OF_BOUNDS if the walk would leave the board
    """
    if steps < 0:
        raise ValueError(f"Step count must not be negative, got {steps}")
    if steps > steps_to_edge(cell, direction):
        return OUT_OF_BOUNDS
    return cell + steps * direction.offset


def is_top_row(cell: int) -> bool:
    """Check whether a cell has no cell above it."""
    return step(cell, 1, Direction.UP) == OUT_OF_BOUNDS


def line_bounds(cell: int, axis: Axis) -> Tuple[int, int]:
    """
    Get the inclusive index range of the whole line through a cell.

    Returns:
        (near, far) where near is the lower index
    """
    return edge_limit(cell, axis.lower), edge_limit(cell, axis.upper)


def row_bounds(cell: int) -> Tuple[int, int]:
    """Get the (left, right) cells of the row containing a cell."""
    return line_bounds(cell, Axis.HORIZONTAL)


def column_bounds(cell: int) -> Tuple[int, int]:
    """Get the (top, bottom) cells of the column containing a cell."""
    return line_bounds(cell, Axis.VERTICAL)


def diagonal_bounds(cell: int, axis: Axis) -> Tuple[int, int]:
    """
    Get the (near, far) cells of a diagonal through a cell.

    Args:
        cell: Reference cell index
        axis: Axis.DIAGONAL_DOWN or Axis.DIAGONAL_UP
    """
    if axis not in (Axis.DIAGONAL_DOWN, Axis.DIAGONAL_UP):
        raise ValueError(f"Expected a diagonal axis, got {axis}")
    return line_bounds(cell, axis)


def line_cells(cell: int, axis: Axis) -> List[int]:
    """List every cell on the line through a cell, lowest index first."""
    near, far = line_bounds(cell, axis)
    return list(range(near, far + 1, axis.stride))


def scan_window_limits(cell: int, direction: Union[Direction, Axis]) -> Tuple[int, int]:
    """
    Get the index range a four-cell window through a cell can occupy.

    The range extends up to REACH steps each way along the axis of the
    given direction and is clipped to the board edges.

    Args:
        cell: Reference cell index
        direction: Any direction on the axis (or the axis itself)

    Returns:
        (lower, upper) inclusive cell indices
    """
    axis = direction if isinstance(direction, Axis) else direction.axis
    return reach_limit(cell, axis.lower), reach_limit(cell, axis.upper)


def window_starts(cell: int, axis: Axis) -> range:
    """Get the first cell of every window on an axis that contains the cell."""
    lower, upper = scan_window_limits(cell, axis)
    stride = axis.stride
    return range(lower, upper - REACH * stride + 1, stride)


def windows(cell: int, axis: Axis) -> Iterator[Tuple[int, ...]]:
    """Yield the cells of every four-cell window on an axis containing the cell."""
    stride = axis.stride
    for start in window_starts(cell, axis):
        yield tuple(start + k * stride for k in range(REACH + 1))
