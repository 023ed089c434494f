"""
rules.py - Game session management for Connect Four

This module provides the turn loop that sits around the board: it assigns
tokens, decides who moves first, asks the current player for a column,
applies it, and detects wins, draws and resignations.
"""

import random
from typing import Callable, List, Optional, Tuple

from connectfour.debug import debug
from connectfour.utils import GameResult, Token
from connectfour.game.board import Board
from connectfour.game.players import Player


class ConnectFourGame:
    """
    A single Connect Four game between two players.

    The first player gets token +1 and the second -1. The game owns the
    authoritative board; players only ever see it through choose_move().
    """

    def __init__(self, player_one: Player, player_two: Player,
                 first_player: Optional[Player] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize a new game.

        Args:
            player_one: Player using token +1
            player_two: Player using token -1
            first_player: Player who moves first (random if not given)
            rng: Random source for picking the first player
        """
        if player_one is player_two:
            raise ValueError("A game needs two distinct players")

        player_one.token = Token.ONE
        player_two.token = Token.TWO
        self.players: Tuple[Player, Player] = (player_one, player_two)
        self.rng = rng or random.Random()

        if first_player is None:
            first_player = self.rng.choice(self.players)
        elif first_player not in self.players:
            raise ValueError(f"{first_player.name} is not playing this game")

        self.board = Board()
        self.current_player = first_player
        self.result = GameResult.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.last_cell: Optional[int] = None
        self.history: List[int] = []
        debug.info(f"New game: {player_one.name} vs {player_two.name}, "
                   f"{first_player.name} moves first", "game")

    def opponent_of(self, player: Player) -> Player:
        """Get the other player of this game."""
        return self.players[1] if player is self.players[0] else self.players[0]

    def is_game_over(self) -> bool:
        return self.result.is_game_over()

    def get_valid_moves(self) -> List[int]:
        return self.board.get_valid_moves()

    def apply_move(self, column: int) -> int:
        """
        Drop the current player's token and update the game state.

        Args:
            column: Column to play (0-indexed)

        Returns:
            Index of the cell the token landed on
        """
        if self.is_game_over():
            raise ValueError(f"The game is over ({self.result.name.lower()})")
        if not self.board.is_valid_move(column):
            raise ValueError(f"Column {column + 1} is not playable")

        player = self.current_player
        cell = self.board.drop(column, player.token)
        self.last_cell = cell
        self.history.append(column)

        if self.board.check_win(player.token, cell):
            self.result = GameResult.WIN
            self.winner = player
            debug.info(f"{player.name} wins with a token at cell {cell}", "game")
        elif self.board.is_full():
            self.result = GameResult.DRAW
            debug.info("Game ends in a draw", "game")
        else:
            self.current_player = self.opponent_of(player)

        return cell

    def resign(self, player: Optional[Player] = None) -> None:
        """End the game with a player (the current one by default) giving up."""
        if self.is_game_over():
            raise ValueError(f"The game is over ({self.result.name.lower()})")
        player = player or self.current_player
        self.result = GameResult.RESIGNED
        self.winner = self.opponent_of(player)
        debug.info(f"{player.name} resigns", "game")

    def play_turn(self) -> GameResult:
        """
        Ask the current player for a move and apply it.

        Returns:
            The game result after the turn
        """
        if not self.board.get_valid_moves():
            self.result = GameResult.DRAW
            debug.info("No playable column left, game ends in a draw", "game")
            return self.result

        column = self.current_player.choose_move(self.board)
        if column is None:
            self.resign()
        else:
            self.apply_move(column)
        return self.result

    def play(self, on_turn: Optional[Callable[['ConnectFourGame'], None]] = None) -> GameResult:
        """
        Run turns until the game ends.

        Args:
            on_turn: Called after every turn with the game

        Returns:
            The final game result
        """
        while not self.is_game_over():
            self.play_turn()
            if on_turn is not None:
                on_turn(self)
        return self.result

    def get_winning_line(self) -> List[int]:
        """Get the cells of the winning line, or an empty list."""
        if self.result != GameResult.WIN or self.last_cell is None:
            return []
        return self.board.get_winning_line(self.winner.token, self.last_cell)
