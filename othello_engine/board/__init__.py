"""
Board Module

This module provides the Othello game state: an immutable 8x8 board with
move generation under the sandwich rule, move application, scoring and
terminal detection.

Key Components:
    - Board: Immutable board value (apply() returns a new Board)
    - Cell / Outcome: Square states and game results
    - Move / Score: Coordinate pair and disc counts
    - Functional helpers mirroring the Board methods

Data Flow:
    Board.initial() -> board.apply(row, col, color) -> new Board -> ...
"""

from othello_engine.board.representation import (
    BOARD_SIZE,
    DIRECTIONS,
    Board,
    Cell,
    IllegalMoveError,
    Move,
    Outcome,
    Score,
    apply_move,
    initial_board,
    is_legal_move,
    is_terminal,
    legal_moves,
    moves_to_notation,
    score,
    winner,
)

__all__ = [
    'BOARD_SIZE',
    'DIRECTIONS',
    'Board',
    'Cell',
    'IllegalMoveError',
    'Move',
    'Outcome',
    'Score',
    'apply_move',
    'initial_board',
    'is_legal_move',
    'is_terminal',
    'legal_moves',
    'moves_to_notation',
    'score',
    'winner',
]
