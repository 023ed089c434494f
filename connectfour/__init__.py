"""
connectfour - Connect Four console game with a tiered heuristic opponent

This package provides the flat 42-cell board and its win detection, a
single-ply scoring engine for four computer difficulties, a game session
turn loop, and a command-line interface for playing and inspecting games.
"""

# Version number
__version__ = '1.0.0'
