"""
Evaluation Module

This module provides position evaluation functions for the Othello engine.
The key design principle is that evaluators are SWAPPABLE - the search
algorithm should work with any evaluator that implements the base interface.

Key Components:
    - Evaluator (ABC): Abstract base class with terminal (win/loss/tie) scoring
    - HeuristicEvaluator: Square weights + mobility + corners + disc count

Data Flow:
    Board, Cell -> evaluator.evaluate() -> int
                                           Positive = good for that Cell
                                           Negative = good for its opponent

"""

from othello_engine.evaluation.base import Evaluator, WIN_SCORE
from othello_engine.evaluation.heuristic import (
    HeuristicEvaluator,
    POSITION_WEIGHTS,
    evaluate_position,
)

__all__ = [
    'Evaluator',
    'WIN_SCORE',
    'HeuristicEvaluator',
    'POSITION_WEIGHTS',
    'evaluate_position',
]
