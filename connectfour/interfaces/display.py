"""
display.py - Console rendering for Connect Four

This module draws the board with box-drawing characters and ANSI colours
and formats the menus and result messages shown by the CLI. Every function
returns a string; printing is left to the caller.
"""

from typing import Iterable, List, Optional

from connectfour.utils import ROWS, COLS, Difficulty, Token
from connectfour.game.board import Board

RESET = "\033[0m"
BOLD = "\033[1m"
FG_BLACK = "\033[30m"
FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
BG_RED = "\033[41m"
BG_YELLOW = "\033[43m"
REVERSE = "\033[7m"

# Frame characters: (left, join, right) for each border row
TOP = ("╔", "╦", "╗")
MIDDLE = ("╠", "╬", "╣")
BOTTOM = ("╚", "╩", "╝")
HORIZONTAL = "═"
VERTICAL = "║"

TOKEN_COLORS = {
    Token.ONE: FG_RED,
    Token.TWO: FG_YELLOW,
}
TOKEN_BACKGROUNDS = {
    Token.ONE: BG_RED,
    Token.TWO: BG_YELLOW,
}


def colorize(text: str, *codes: str, use_color: bool = True) -> str:
    """Wrap text in ANSI codes, or return it unchanged when colour is off."""
    if not use_color or not codes:
        return text
    return "".join(codes) + text + RESET


def player_label(name: str, token: int, use_color: bool = True) -> str:
    """Format a player name in the colour of their token."""
    return colorize(name, BOLD, TOKEN_COLORS.get(token, ""), use_color=use_color)


def _border(kind, use_color: bool) -> str:
    left, join, right = kind
    line = left + join.join(HORIZONTAL * 3 for _ in range(COLS)) + right
    return colorize(line, FG_CYAN, use_color=use_color)


def _piece(value: int, highlighted: bool, use_color: bool) -> str:
    if value == Token.EMPTY:
        return "   "
    text = f" {Token(value)} "
    if not use_color:
        return f"[{Token(value)}]" if highlighted else text
    codes = [FG_BLACK, TOKEN_BACKGROUNDS[value]]
    if highlighted:
        codes.append(REVERSE)
    return colorize(text, *codes)


def render_board(board: Board, show_options: bool = True,
                 highlight: Optional[Iterable[int]] = None,
                 use_color: bool = True) -> str:
    """
    Render the board as a framed grid.

    Args:
        board: Board to draw
        show_options: Add the numbers of the playable columns and the quit key
        highlight: Cells to emphasise, such as a winning line
        use_color: Emit ANSI colour codes

    Returns:
        The drawing as a multi-line string
    """
    marked = set(highlight or ())
    wall = colorize(VERTICAL, FG_CYAN, use_color=use_color)
    lines: List[str] = [_border(TOP, use_color)]

    for row in range(ROWS):
        parts = []
        for col in range(COLS):
            cell = row * COLS + col
            parts.append(wall + _piece(board[cell], cell in marked, use_color))
        lines.append("".join(parts) + wall)
        if row < ROWS - 1:
            lines.append(_border(MIDDLE, use_color))
    lines.append(_border(BOTTOM, use_color))

    if show_options:
        # Full columns get no number
        numbers = "".join(f"  {col + 1} " if board.is_valid_move(col) else "    "
                          for col in range(COLS))
        lines.append(numbers + "   [Q] Quit")

    return "\n".join(lines)


def banner() -> str:
    return "\n".join(["==============", " Connect Four ", "=============="])


def menu_select_opponent(name: str, token: int, use_color: bool = True) -> str:
    return (f"Who will {player_label(name, token, use_color)} play against?\n"
            "  [H] Human\n"
            "  [C] Computer\n"
            "Choice: ")


def menu_select_difficulty() -> str:
    options = "\n".join(f"  [{level.value}] {level.label}" for level in Difficulty)
    return f"Select computer difficulty:\n{options}\nChoice: "


def message_player_turn(name: str, token: int, use_color: bool = True) -> str:
    return f"{player_label(name, token, use_color)}, choose a column [1-{COLS}] or [Q] to quit: "


def message_computer_move(name: str, token: int, column: int, use_color: bool = True) -> str:
    return f"{player_label(name, token, use_color)} drops a token in column {column + 1}."


def message_win(name: str, token: int, use_color: bool = True) -> str:
    return f"{player_label(name, token, use_color)} wins!"


def message_draw(name_one: str, token_one: int, name_two: str, token_two: int,
                 use_color: bool = True) -> str:
    return (f"The board is full. {player_label(name_one, token_one, use_color)} and "
            f"{player_label(name_two, token_two, use_color)} end in a draw.")


def message_resignation(name: str, token: int, opponent: str, opponent_token: int,
                        use_color: bool = True) -> str:
    return (f"{player_label(name, token, use_color)} resigns. "
            f"{player_label(opponent, opponent_token, use_color)} wins!")
