"""
Search Module

This module implements the Othello move search: depth-limited minimax with
optional alpha-beta pruning and node-count telemetry.

Key Components:
    - search_value: Recursive minimax evaluator (pass-turn aware)
    - find_best_move: Root-level search function
    - SearchEngine: Per-session toggles and last node count
    - SearchContext: Telemetry for a single search

"""

from othello_engine.search.context import SearchContext
from othello_engine.search.minimax import (
    SearchEngine,
    SearchResult,
    find_best_move,
    search_value,
)

__all__ = [
    'SearchContext',
    'SearchEngine',
    'SearchResult',
    'find_best_move',
    'search_value',
]
