"""
Abstract Evaluator Interface

This module defines the abstract base class for all position evaluators.
By defining a common interface, we can swap between
evaluators without modifying the search algorithm.

Key Principles:
    1. Evaluators are stateless
    2. evaluate() scores a position from a named player's perspective
    3. Positive = good for that player, Negative = good for the opponent
    4. Finished games score +/-WIN_SCORE (or 0 for a tie)
"""

from abc import ABC, abstractmethod
from typing import Optional

from othello_engine.board.representation import Board, Cell, Outcome


# Evaluation constants
WIN_SCORE = 10000  # Score of a won game; larger than any heuristic value


class Evaluator(ABC):
    """
    Abstract base class for position evaluation.

    All evaluator implementations must inherit from this class and implement
    the evaluate() method. This ensures compatibility with the search algorithm.

    Methods:
        evaluate(board, color): Returns the heuristic score for color
    """

    @abstractmethod
    def evaluate(self, board: Board, color: Cell) -> int:
        """
        Evaluate a position from color's perspective.

        Args:
            board: Board to evaluate
            color: Player whose perspective the score is from

        Returns:
            int: Higher is better for color
        """
        pass

    def evaluate_terminal(self, board: Board, root_color: Cell) -> Optional[int]:
        """
        Score finished games.

        This is a helper method that search algorithms can call to
        know when they can stop searching. A finished game always
        short-circuits the heuristic, whatever depth remains.

        Args:
            board: Board to check
            root_color: Player the search is maximizing for

        Returns:
            int: WIN_SCORE, -WIN_SCORE or 0 if neither player can move
            None: If the game is not over
        """
        if not board.is_terminal():
            return None

        outcome = board.winner()
        if outcome is Outcome.TIE:
            return 0
        if outcome == Outcome(root_color):
            return WIN_SCORE
        return -WIN_SCORE

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
