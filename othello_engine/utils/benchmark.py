"""
Pruning Benchmark

This module measures what alpha-beta pruning buys: the same position is
searched with and without pruning, and the moves, scores and node counts
are compared.

Test Positions:
    Midgame positions are produced by seeded random playouts from the
    initial board, so a benchmark run is reproducible from its seed.

Evaluation Metrics:
    - Agreement: pruned and unpruned search return the same move and score
    - Node Reduction: 1 - pruned_nodes / unpruned_nodes
    - Time per Position: wall-clock time of both searches
"""

import random
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from tqdm import tqdm

from othello_engine.board.representation import Board, Cell, Move
from othello_engine.evaluation.base import Evaluator
from othello_engine.evaluation.heuristic import HeuristicEvaluator
from othello_engine.search.minimax import find_best_move


@dataclass
class BenchmarkPosition:
    """
    A position to search.

    Attributes:
        board: Position
        color: Player to move (has at least one legal move)
        id: Position identifier (e.g., "P.03")
    """
    board: Board
    color: Cell
    id: str = ""


@dataclass
class PruningComparison:
    """
    Pruned vs. unpruned search of one position.

    Attributes:
        position: The searched position
        depth: Search depth used
        move / score / nodes: Unpruned result
        pruned_move / pruned_score / pruned_nodes: Pruned result
        time_taken: Seconds spent on both searches
    """
    position: BenchmarkPosition
    depth: int
    move: Optional[Move]
    score: Optional[int]
    nodes: int
    pruned_move: Optional[Move]
    pruned_score: Optional[int]
    pruned_nodes: int
    time_taken: float = 0.0

    @property
    def agrees(self) -> bool:
        return self.move == self.pruned_move and self.score == self.pruned_score

    @property
    def reduction(self) -> float:
        """Fraction of nodes saved by pruning (0.0 when nothing was searched)."""
        if self.nodes == 0:
            return 0.0
        return 1.0 - self.pruned_nodes / self.nodes


def generate_positions(count: int, plies: int = 20, seed: Optional[int] = 0) -> List[BenchmarkPosition]:
    """
    Generate midgame positions by random playouts.

    Each playout starts from the initial board and plays up to `plies`
    random legal moves, passing when the player to move is stuck. Playouts
    that end the game, or reach a position where the player to move has
    no move, are discarded.

    Args:
        count: Number of positions to return
        plies: Random moves per playout
        seed: Random seed (None for a random run)

    Returns:
        List of BenchmarkPosition
    """
    rng = random.Random(seed)
    positions: List[BenchmarkPosition] = []
    attempts = 0

    while len(positions) < count and attempts < count * 20:
        attempts += 1
        board = Board.initial()
        color = Cell.DARK

        for _ in range(plies):
            moves = board.legal_moves(color)
            if not moves:
                if board.is_terminal():
                    break
                color = color.opponent
                continue
            move = rng.choice(moves)
            board = board.apply(move.row, move.col, color)
            color = color.opponent

        if board.has_any_move(color):
            positions.append(
                BenchmarkPosition(board=board, color=color, id=f"P.{len(positions) + 1:02d}")
            )

    return positions


def compare_pruning(
    position: BenchmarkPosition,
    depth: int,
    evaluator: Optional[Evaluator] = None,
) -> PruningComparison:
    """
    Search one position with and without pruning.

    Args:
        position: Position to search
        depth: Search depth
        evaluator: Position evaluator (default: HeuristicEvaluator)

    Returns:
        PruningComparison
    """
    evaluator = evaluator if evaluator is not None else HeuristicEvaluator()
    start_time = time.time()

    full = find_best_move(
        position.board, position.color, depth, pruning_enabled=False, evaluator=evaluator
    )
    pruned = find_best_move(
        position.board, position.color, depth, pruning_enabled=True, evaluator=evaluator
    )

    return PruningComparison(
        position=position,
        depth=depth,
        move=full.move,
        score=full.score,
        nodes=full.nodes_examined,
        pruned_move=pruned.move,
        pruned_score=pruned.score,
        pruned_nodes=pruned.nodes_examined,
        time_taken=time.time() - start_time,
    )


def run_pruning_benchmark(
    positions: Sequence[BenchmarkPosition],
    depth: int,
    evaluator: Optional[Evaluator] = None,
    progress: bool = False,
) -> Dict[str, Any]:
    """
    Compare pruned and unpruned search over a set of positions.

    Args:
        positions: Positions to search
        depth: Search depth
        evaluator: Position evaluator (default: HeuristicEvaluator)
        progress: Show a tqdm progress bar

    Returns:
        Dictionary with benchmark results:
            - depth: Search depth
            - total: Number of positions
            - agreed: Positions where both searches agree
            - nodes: Total unpruned nodes
            - pruned_nodes: Total pruned nodes
            - reduction: Overall fraction of nodes saved
            - avg_time: Average time per position
            - results: List of PruningComparison objects
    """
    evaluator = evaluator if evaluator is not None else HeuristicEvaluator()

    results = []
    for position in tqdm(positions, desc=f"depth {depth}", disable=not progress, leave=False):
        results.append(compare_pruning(position, depth, evaluator))

    nodes = sum(r.nodes for r in results)
    pruned_nodes = sum(r.pruned_nodes for r in results)
    total_time = sum(r.time_taken for r in results)

    return {
        'depth': depth,
        'total': len(results),
        'agreed': sum(1 for r in results if r.agrees),
        'nodes': nodes,
        'pruned_nodes': pruned_nodes,
        'reduction': (1.0 - pruned_nodes / nodes) if nodes else 0.0,
        'avg_time': total_time / len(results) if results else 0.0,
        'total_time': total_time,
        'results': results,
    }
