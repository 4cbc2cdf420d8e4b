"""
Positional Heuristic Evaluation

This module implements the static evaluation used at the search horizon.
The score is a sum of four terms, each taken as the player's value minus
the opponent's value:

    1. Position: square weights over occupied cells
    2. Mobility: legal move count difference * 5
    3. Corners: corner count difference * 30
    4. Discs: disc count difference * 10 late in the game, * 2 before

Late game means more than 45 discs on the board. Counting material early
misleads (mobility and position matter more), near the end it decides the
game.

Because every term is a difference, evaluate(board, c) equals
-evaluate(board, c.opponent) exactly.
"""

import numpy as np

from othello_engine.board.representation import Board, Cell
from othello_engine.evaluation.base import Evaluator

#fmt: off
# ============================================================================
# Square Weights
# ============================================================================
# Corners are stable and worth the most. The diagonal neighbours of a corner
# (X-squares) and its edge neighbours (C-squares) tend to give the corner
# away, so they are penalised.
#
# ============================================================================

POSITION_WEIGHTS = np.array([
    [100, -20,  10,   5,   5,  10, -20, 100],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [ 10,  -5,   5,   2,   2,   5,  -5,  10],
    [  5,  -5,   2,   0,   0,   2,  -5,   5],
    [  5,  -5,   2,   0,   0,   2,  -5,   5],
    [ 10,  -5,   5,   2,   2,   5,  -5,  10],
    [-20, -40,  -5,  -5,  -5,  -5, -40, -20],
    [100, -20,  10,   5,   5,  10, -20, 100],
], dtype=np.int32)
POSITION_WEIGHTS.flags.writeable = False
#fmt: on

CORNERS = ((0, 0), (0, 7), (7, 0), (7, 7))

MOBILITY_WEIGHT = 5
CORNER_WEIGHT = 30
LATE_GAME_THRESHOLD = 45
LATE_DISC_WEIGHT = 10
EARLY_DISC_WEIGHT = 2


class HeuristicEvaluator(Evaluator):
    """
    Positional evaluation combining square weights, mobility, corner
    control and a phase-weighted disc differential.

    Attributes:
        weights: (8, 8) square weight matrix
    """

    def __init__(self, weights: np.ndarray = POSITION_WEIGHTS):
        self.weights = weights

    def is_late_game(self, board: Board) -> bool:
        return board.occupied > LATE_GAME_THRESHOLD

    def positional_score(self, board: Board, color: Cell) -> int:
        cells = board.to_array()
        mine = self.weights[cells == int(color)].sum()
        theirs = self.weights[cells == int(color.opponent)].sum()
        return int(mine - theirs)

    def mobility_score(self, board: Board, color: Cell) -> int:
        # Mobility is weighted the same in every phase
        mine = len(board.legal_moves(color))
        theirs = len(board.legal_moves(color.opponent))
        if mine + theirs == 0:
            return 0
        return (mine - theirs) * MOBILITY_WEIGHT

    def corner_score(self, board: Board, color: Cell) -> int:
        mine = sum(1 for r, c in CORNERS if board.get(r, c) == color)
        theirs = sum(1 for r, c in CORNERS if board.get(r, c) == color.opponent)
        return (mine - theirs) * CORNER_WEIGHT

    def disc_score(self, board: Board, color: Cell) -> int:
        difference = board.count(color) - board.count(color.opponent)
        if self.is_late_game(board):
            return difference * LATE_DISC_WEIGHT
        return difference * EARLY_DISC_WEIGHT

    def evaluate(self, board: Board, color: Cell) -> int:
        """
        Evaluate position for color.

        Args:
            board: Board to evaluate
            color: Perspective (DARK or LIGHT)

        Returns:
            int: Sum of the four terms, higher is better for color
        """
        color = Cell(color)
        return (
            self.positional_score(board, color)
            + self.mobility_score(board, color)
            + self.corner_score(board, color)
            + self.disc_score(board, color)
        )


_DEFAULT_EVALUATOR = HeuristicEvaluator()


def evaluate_position(board: Board, color: Cell) -> int:
    """Evaluate with the default HeuristicEvaluator."""
    return _DEFAULT_EVALUATOR.evaluate(board, color)
