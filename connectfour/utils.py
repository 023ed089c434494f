"""
utils.py - Constants and enumerations shared across the Connect Four engine

This module provides the fixed board dimensions, the token values stored in
board cells, the compass directions and line axes used for geometric
traversal, and the enumerations for computer difficulty and game outcome.
"""

from enum import Enum, IntEnum, auto

# Board constants
ROWS = 6
COLS = 7
CELLS = ROWS * COLS
CONNECT_N = 4  # Number of tokens in a line to win
REACH = CONNECT_N - 1  # Furthest step from a cell that can share a window with it

# Returned by geometry lookups that would leave the board
OUT_OF_BOUNDS = -1


class Token(IntEnum):
    """
    Cell values stored on the board.

    The two players use opposite signs so that four cells summing to
    4 * token can only mean four tokens of that player.
    """
    EMPTY = 0
    ONE = 1     # First player
    TWO = -1    # Second player

    def other(self) -> 'Token':
        """Get the opposing token."""
        if self == Token.EMPTY:
            return Token.EMPTY
        return Token(-self.value)

    def __str__(self):
        if self == Token.ONE:
            return "X"
        elif self == Token.TWO:
            return "O"
        return " "


def check_token(token: int) -> int:
    """
    Validate a player token.

    Args:
        token: Value to validate

    Returns:
        The token as a plain int

    Raises:
        ValueError: If the token is not +1 or -1
    """
    if token not in (Token.ONE, Token.TWO):
        raise ValueError(f"Token must be +1 or -1, got {token!r}")
    return int(token)


class Direction(Enum):
    """Compass directions on the board, valued as (row delta, column delta)."""
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    @property
    def offset(self) -> int:
        """Change in flat cell index for one step in this direction."""
        return self.value[0] * COLS + self.value[1]

    @property
    def opposite(self) -> 'Direction':
        return Direction((-self.value[0], -self.value[1]))

    @property
    def axis(self) -> 'Axis':
        for axis, pair in AXIS_DIRECTIONS.items():
            if self in pair:
                return axis
        raise ValueError(f"No axis for direction {self}")  # unreachable


class Axis(Enum):
    """The four line families a window can lie on."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # Top-left to bottom-right (\)
    DIAGONAL_UP = auto()    # Bottom-left to top-right (/)

    @property
    def lower(self) -> Direction:
        """Direction toward lower cell indices along this axis."""
        return AXIS_DIRECTIONS[self][0]

    @property
    def upper(self) -> Direction:
        """Direction toward higher cell indices along this axis."""
        return AXIS_DIRECTIONS[self][1]

    @property
    def stride(self) -> int:
        """Index distance between neighbouring cells on this axis."""
        return AXIS_DIRECTIONS[self][1].offset


# (lower, upper) direction pair for each axis; upper always has a positive offset
AXIS_DIRECTIONS = {
    Axis.HORIZONTAL: (Direction.LEFT, Direction.RIGHT),
    Axis.VERTICAL: (Direction.UP, Direction.DOWN),
    Axis.DIAGONAL_DOWN: (Direction.UP_LEFT, Direction.DOWN_RIGHT),
    Axis.DIAGONAL_UP: (Direction.UP_RIGHT, Direction.DOWN_LEFT),
}


class Difficulty(IntEnum):
    """Computer skill tiers; each tier adds scoring passes to the one below."""
    RANDOM = 0
    EASY = 1
    NORMAL = 2
    ADVANCED = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    WIN = auto()
    DRAW = auto()
    RESIGNED = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS
