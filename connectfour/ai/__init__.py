"""
connectfour.ai - Computer opponent for Connect Four

This package provides the scoring passes and the tiered heuristic engine
that chooses the computer's moves.
"""

from connectfour.ai.heuristic import HeuristicEngine

__all__ = ['HeuristicEngine']
