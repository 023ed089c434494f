"""
scoring.py - Scoring passes for the computer's single-ply move heuristic

Each pass walks the candidate landing cells, places a hypothetical token on
a scratch copy of the board, counts the four-cell windows through the cell
that hold only one player's tokens and empties, and adds a fixed weight per
window depending on how many tokens it holds. The scratch cells are reset to
empty before moving to the next candidate.

Passes never mutate the score map they are given; they return a new map.
"""

import numpy as np
from typing import Dict, Iterable, Mapping, Optional, Sequence

from connectfour.debug import debug, DebugLevel
from connectfour.utils import Axis, Direction, OUT_OF_BOUNDS, Token, check_token
from connectfour.game.board import Board
from connectfour.game.geometry import step, windows

# Own lines through the played cell
SCORE_ONE_TOKEN = 1
SCORE_TWO_TOKEN = 10
SCORE_THREE_TOKEN = 100
SCORE_CONNECT_FOUR = 99999

# Opponent lines the played cell sits in
SCORE_BLOCK_TWO = 5
SCORE_BLOCK_THREE = 50
SCORE_BLOCK_CONNECT_FOUR = 9999

# Opponent lines through the cell our move makes reachable
SCORE_ENEMY_GETS_THREE = -50
SCORE_ENEMY_CONNECTS_FOUR = -9999

# Own lines through the cell our move hands to the opponent
SCORE_LOSE_THREE = -30
SCORE_LOSE_CONNECT_FOUR = -9999

PLACEMENT_WEIGHTS = {
    1: SCORE_ONE_TOKEN,
    2: SCORE_TWO_TOKEN,
    3: SCORE_THREE_TOKEN,
    4: SCORE_CONNECT_FOUR,
}
BLOCK_WEIGHTS = {
    2: SCORE_BLOCK_TWO,
    3: SCORE_BLOCK_THREE,
    4: SCORE_BLOCK_CONNECT_FOUR,
}
GIVING_WEIGHTS = {
    3: SCORE_ENEMY_GETS_THREE,
    4: SCORE_ENEMY_CONNECTS_FOUR,
}
LOSING_WEIGHTS = {
    3: SCORE_LOSE_THREE,
    4: SCORE_LOSE_CONNECT_FOUR,
}

PLACEMENT_COUNTS = (1, 2, 3, 4)
EASY_BLOCK_COUNTS = (3, 4)
BLOCK_COUNTS = (2, 3, 4)
LOOKAHEAD_COUNTS = (3, 4)


def count_in_line(token: int, values: Sequence[int], count: int) -> bool:
    """
    Check if a window holds exactly `count` of a token and nothing else.

    Args:
        token: Token whose line is being counted
        values: The four cell values of the window
        count: Number of tokens wanted in the window

    Returns:
        True if every value is the token or empty and they sum to token * count
    """
    values = np.asarray(values)
    if not np.all((values == token) | (values == Token.EMPTY)):
        return False
    return int(values.sum()) == token * count


def score_cell(board: Board, token: int, cell: int,
               counts: Iterable[int], weights: Mapping[int, int],
               skip_cell: Optional[int] = None) -> int:
    """
    Score every window through a cell on all four axes.

    Args:
        board: Board to read
        token: Token whose lines are counted
        cell: Cell the windows must contain
        counts: Token counts that earn a weight
        weights: Weight for each count
        skip_cell: Ignore windows that also contain this cell

    Returns:
        Sum of the weights of all matching windows
    """
    score = 0
    for count in counts:
        for axis in Axis:
            for window in windows(cell, axis):
                if skip_cell in window:
                    continue
                if count_in_line(token, board.cells[list(window)], count):
                    score += weights[count]
    return score


def _scored(moves: Mapping[int, int], deltas: Dict[int, int], pass_name: str) -> Dict[int, int]:
    updated = dict(moves)
    for cell, delta in deltas.items():
        updated[cell] += delta
    if debug.enabled_for(DebugLevel.TRACE, "ai"):
        debug.trace(f"{pass_name}: {deltas}", "ai")
    return updated


def score_placement(token: int, board: Board, moves: Mapping[int, int]) -> Dict[int, int]:
    """
    Reward moves by the own lines of one to four tokens they take part in.

    Args:
        token: Token of the player to move
        board: Scratch board; cells are reset after each candidate
        moves: Current score per candidate landing cell

    Returns:
        New score map with the placement scores added
    """
    token = check_token(token)
    deltas = {}
    for cell in moves:
        board[cell] = token
        deltas[cell] = score_cell(board, token, cell, PLACEMENT_COUNTS, PLACEMENT_WEIGHTS)
        board[cell] = Token.EMPTY
    return _scored(moves, deltas, "placement")


def _score_block(token: int, board: Board, moves: Mapping[int, int],
                 counts: Sequence[int], pass_name: str) -> Dict[int, int]:
    opponent = -check_token(token)
    deltas = {}
    for cell in moves:
        board[cell] = opponent
        deltas[cell] = score_cell(board, opponent, cell, counts, BLOCK_WEIGHTS)
        board[cell] = Token.EMPTY
    return _scored(moves, deltas, pass_name)


def score_easy_blocking(token: int, board: Board, moves: Mapping[int, int]) -> Dict[int, int]:
    """
    Reward moves that take a cell the opponent needs for three or four in a line.

    The opponent's token is placed on each candidate to see which of its
    lines the cell belongs to.
    """
    return _score_block(token, board, moves, EASY_BLOCK_COUNTS, "easy blocking")


def score_blocking(token: int, board: Board, moves: Mapping[int, int]) -> Dict[int, int]:
    """
    Reward moves that take a cell the opponent needs for two to four in a line.
    """
    return _score_block(token, board, moves, BLOCK_COUNTS, "blocking")


def _score_lookahead(token: int, reply: int, board: Board, moves: Mapping[int, int],
                     weights: Mapping[int, int], pass_name: str,
                     skip_candidate: bool = False) -> Dict[int, int]:
    # Top-row candidates have no cell above and are left unscored
    deltas = {}
    for cell in moves:
        above = step(cell, 1, Direction.UP)
        if above == OUT_OF_BOUNDS:
            continue

        board[cell] = token
        board[above] = reply
        skip = cell if skip_candidate else None
        deltas[cell] = score_cell(board, reply, above, LOOKAHEAD_COUNTS, weights, skip)
        board[cell] = Token.EMPTY
        board[above] = Token.EMPTY
    return _scored(moves, deltas, pass_name)


def score_giving(token: int, board: Board, moves: Mapping[int, int]) -> Dict[int, int]:
    """
    Penalize moves that open a strong cell for the opponent.

    After our token lands on a candidate, the cell above becomes playable;
    the opponent's reply there is simulated and its lines of three or four
    through that cell are charged against the candidate.
    """
    token = check_token(token)
    return _score_lookahead(token, -token, board, moves, GIVING_WEIGHTS, "giving")


def score_losing(token: int, board: Board, moves: Mapping[int, int]) -> Dict[int, int]:
    """
    Penalize moves that hand away a strong cell of our own.

    The cell above a candidate would be ours to use later, but playing the
    candidate lets the opponent take it first. Our own lines of three or
    four through that cell are charged against the candidate. Lines that
    run through the candidate itself are left out: those are chances the
    move creates, not ones it gives away.
    """
    token = check_token(token)
    return _score_lookahead(token, token, board, moves, LOSING_WEIGHTS, "losing",
                            skip_candidate=True)
