"""
connectfour.game - Core game mechanics for Connect Four

This package contains the board geometry, the board with its win
detection, the players, and game session management. Only the board is
re-exported here; players and rules depend on the ai package, which itself
builds on the board.
"""

from connectfour.game.board import Board

__all__ = ['Board']
