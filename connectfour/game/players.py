"""
players.py - Move providers for a Connect Four session

A player is anything that, given the current board, returns the column it
wants to play or None to resign. Humans delegate to a prompt supplied by the
interface; computers delegate to the heuristic engine.
"""

import random
from typing import Callable, Optional

from connectfour.debug import debug
from connectfour.utils import Difficulty, Token
from connectfour.game.board import Board
from connectfour.ai.heuristic import HeuristicEngine


class Player:
    """Base class holding the name and token of a participant."""

    is_human = False

    def __init__(self, name: str):
        self.name = name
        self.token: int = Token.EMPTY  # assigned by the game session

    def choose_move(self, board: Board) -> Optional[int]:
        """
        Choose a column to play.

        Args:
            board: Current board

        Returns:
            Column index (0-indexed), or None to resign
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, token={int(self.token):+d})"


class HumanPlayer(Player):
    """A player whose moves come from an interactive prompt."""

    is_human = True

    def __init__(self, name: str, prompt: Callable[['HumanPlayer', Board], Optional[int]]):
        """
        Args:
            name: Display name
            prompt: Called with the player and board; must return a playable
                column or None when the player quits
        """
        super().__init__(name)
        self.prompt = prompt

    def choose_move(self, board: Board) -> Optional[int]:
        return self.prompt(self, board)


class ComputerPlayer(Player):
    """A player driven by the heuristic engine."""

    def __init__(self, difficulty: Difficulty, rng: Optional[random.Random] = None,
                 name: Optional[str] = None):
        difficulty = Difficulty(difficulty)
        super().__init__(name or f"Computer({difficulty.label})")
        self.engine = HeuristicEngine(difficulty, rng)

    @property
    def difficulty(self) -> Difficulty:
        return self.engine.difficulty

    def choose_move(self, board: Board) -> int:
        column = self.engine.choose_column(board, self.token)
        debug.info(f"{self.name} plays column {column + 1}", "game")
        return column
