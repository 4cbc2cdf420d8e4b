"""
Utilities Module

This module provides benchmarking helpers for the Othello engine.

Key Components:
    - generate_positions: Reproducible midgame positions from random playouts
    - compare_pruning: Pruned vs. unpruned search of one position
    - run_pruning_benchmark: Summary over many positions

Success Metrics:
    - Every position agrees (pruning never changes move or score)
    - Node reduction grows with depth
"""

from othello_engine.utils.benchmark import (
    BenchmarkPosition,
    PruningComparison,
    compare_pruning,
    generate_positions,
    run_pruning_benchmark,
)

__all__ = [
    'BenchmarkPosition',
    'PruningComparison',
    'compare_pruning',
    'generate_positions',
    'run_pruning_benchmark',
]
