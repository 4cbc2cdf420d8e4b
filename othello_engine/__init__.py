"""
Othello Engine

An Othello (Reversi) game engine with a positional heuristic and minimax
search, plus a console driver for playing against it.

## Architecture

The engine is organized into several key modules:

1. **board**: Game state
   - Immutable 8x8 Board with sandwich-rule move generation
   - Move application, scoring, terminal detection

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - HeuristicEvaluator: square weights, mobility, corners, disc count

3. **search**: Search algorithms
   - Minimax with optional alpha-beta pruning
   - Pass-turn handling when a player has no move
   - Per-search node-count telemetry

4. **console**: Text driver
   - Turn sequencing for human and AI players
   - Command loop on stdin/stdout

5. **utils**: Benchmarking utilities
   - Pruned vs. unpruned search comparison

## Quick Start

### As a Python Library

```python
from othello_engine.board import Board, Cell
from othello_engine.search import find_best_move

board = Board.initial()
move, score, nodes = find_best_move(board, Cell.DARK, depth=4)
print(f"Best move: {move.notation} (score: {score}, nodes: {nodes})")
```

### In the Terminal

```bash
python -m othello_engine.console
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from othello_engine.board import Board, Cell, IllegalMoveError, Move, Outcome, Score
from othello_engine.evaluation import Evaluator, HeuristicEvaluator
from othello_engine.search import SearchEngine, SearchResult, find_best_move

__all__ = [
    'Board',
    'Cell',
    'IllegalMoveError',
    'Move',
    'Outcome',
    'Score',
    'Evaluator',
    'HeuristicEvaluator',
    'SearchEngine',
    'SearchResult',
    'find_best_move',
]
