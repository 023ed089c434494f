"""
heuristic.py - Tiered computer opponent for Connect Four

The engine is a single-ply evaluator, not a search: every playable column's
landing cell gets a score from the scoring passes enabled for the chosen
difficulty, and the best-scoring cell is played.

    RANDOM    uniform choice among playable columns
    EASY      placement + easy blocking
    NORMAL    placement + blocking
    ADVANCED  placement + blocking + giving + losing
"""

import random
from typing import Callable, Dict, List, Optional, Tuple

from connectfour.debug import debug
from connectfour.utils import COLS, Difficulty, check_token
from connectfour.game.board import Board
from connectfour.ai.scoring import (score_placement, score_easy_blocking, score_blocking,
                                    score_giving, score_losing)

ScoringPass = Callable[[int, Board, Dict[int, int]], Dict[int, int]]

TIER_PASSES: Dict[Difficulty, Tuple[ScoringPass, ...]] = {
    Difficulty.RANDOM: (),
    Difficulty.EASY: (score_placement, score_easy_blocking),
    Difficulty.NORMAL: (score_placement, score_blocking),
    Difficulty.ADVANCED: (score_placement, score_blocking, score_giving, score_losing),
}


def candidate_moves(board: Board) -> Dict[int, int]:
    """
    Build the candidate set for a board.

    Returns:
        Landing cell of each playable column mapped to a score of 0,
        in ascending column order
    """
    return {board.lowest_empty_cell(col): 0 for col in board.get_valid_moves()}


def best_cell(scores: Dict[int, int]) -> Optional[int]:
    """
    Pick the highest-scoring candidate.

    Ties go to the lowest column. Only positive scores count, so a map whose
    best score is zero or less yields None.
    """
    chosen = None
    highest = 0
    for cell in sorted(scores, key=lambda c: c % COLS):
        if scores[cell] > highest:
            highest = scores[cell]
            chosen = cell
    return chosen


class HeuristicEngine:
    """
    Chooses moves for a computer player at a fixed difficulty.

    The engine never mutates the board it is given; passes run on a private
    copy. The only state kept between calls is the random generator and the
    scores of the last evaluation, for display and debugging.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.NORMAL,
                 rng: Optional[random.Random] = None):
        """
        Initialize the engine.

        Args:
            difficulty: Skill tier deciding which scoring passes run
            rng: Random source for tier-0 moves and the zero-score fallback
        """
        self.difficulty = Difficulty(difficulty)
        self.rng = rng or random.Random()
        self.last_scores: Dict[int, int] = {}

    @property
    def passes(self) -> Tuple[ScoringPass, ...]:
        return TIER_PASSES[self.difficulty]

    def evaluate(self, board: Board, token: int) -> Dict[int, int]:
        """
        Score every candidate landing cell.

        Args:
            board: Authoritative board (left untouched)
            token: Token of the player to move

        Returns:
            Landing cell mapped to its total score
        """
        token = check_token(token)
        scratch = board.copy()
        scores = candidate_moves(board)
        for scoring_pass in self.passes:
            scores = scoring_pass(token, scratch, scores)
        return scores

    def breakdown(self, board: Board, token: int) -> List[Tuple[str, Dict[int, int]]]:
        """
        Score each pass of this tier separately.

        Returns:
            (pass name, per-cell score) for every pass, in run order
        """
        token = check_token(token)
        scratch = board.copy()
        result = []
        for scoring_pass in self.passes:
            name = scoring_pass.__name__.replace("score_", "")
            result.append((name, scoring_pass(token, scratch, candidate_moves(board))))
        return result

    def random_column(self, board: Board) -> int:
        """Pick uniformly among the playable columns."""
        valid_moves = board.get_valid_moves()
        if not valid_moves:
            raise ValueError("No playable column: the board is full")
        return self.rng.choice(valid_moves)

    def choose_cell(self, board: Board, token: int) -> int:
        """
        Choose the landing cell to play.

        Args:
            board: Authoritative board (left untouched)
            token: Token of the player to move

        Returns:
            Index of the landing cell of the chosen column
        """
        if not board.get_valid_moves():
            raise ValueError("No playable column: the board is full")

        if self.difficulty == Difficulty.RANDOM:
            self.last_scores = {}
            return board.lowest_empty_cell(self.random_column(board))

        with debug.timer("choose_cell", "ai"):
            self.last_scores = self.evaluate(board, token)
            cell = best_cell(self.last_scores)
            if cell is None:
                debug.debug("No candidate scored above zero, falling back to a random column", "ai")
                cell = board.lowest_empty_cell(self.random_column(board))

        debug.debug(f"{self.difficulty.label} picks cell {cell} from {self.last_scores}", "ai")
        return cell

    def choose_column(self, board: Board, token: int) -> int:
        """Choose the column to play (0-indexed)."""
        return self.choose_cell(board, token) % COLS
