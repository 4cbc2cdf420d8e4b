"""
Minimax Search with Alpha-Beta Pruning

This module implements the adversarial search used to pick the AI's move.
Minimax explores the game tree to a fixed depth, and alpha-beta pruning
skips branches that cannot change the result.

Key Concepts:
    - Minimax: Recursive algorithm that assumes optimal play by both sides
    - Alpha-Beta: Optimization that prunes branches that can't affect result
    - Pass-Turn: A player without a legal move passes; this costs one ply
      of depth but adds no branching
    - Root Perspective: Every score is from the root player's point of view,
      so bounds are passed down unchanged (no negamax sign flip)

Move Order:
    Moves are searched in row-major order and the root keeps the first of
    several equally scored moves. Pruned and unpruned searches therefore
    return the same move and score; only the node count differs.

Algorithm Complexity:
    - Minimax: O(b^d) where b=branching factor (~10 in midgame), d=depth
    - Alpha-Beta: O(b^(d/2)) with perfect move ordering

References:
    - Minimax: https://www.chessprogramming.org/Minimax
    - Alpha-Beta: https://www.chessprogramming.org/Alpha-Beta
"""

import logging
from typing import NamedTuple, Optional

from othello_engine.board.representation import Board, Cell, Move
from othello_engine.evaluation.base import Evaluator
from othello_engine.evaluation.heuristic import HeuristicEvaluator
from othello_engine.search.context import SearchContext

logger = logging.getLogger(__name__)

INFINITY = float("inf")


class SearchResult(NamedTuple):
    """Outcome of one find_best_move call."""

    move: Optional[Move]
    score: Optional[int]
    nodes_examined: int


def search_value(
    board: Board,
    color_to_move: Cell,
    depth: int,
    maximizing: bool,
    root_color: Cell,
    alpha: float,
    beta: float,
    context: SearchContext,
    evaluator: Evaluator,
    ply_from_root: int = 1,
) -> float:
    """
    Minimax value of a position, optionally with alpha-beta pruning.

    Args:
        board: Position to score
        color_to_move: Player whose turn it is in this position
        depth: Remaining search depth (decrements each recursive call)
        maximizing: True if color_to_move is root_color's side of the tree
        root_color: Player the scores are relative to
        alpha: Best score the maximizer can already force
        beta: Best score the minimizer can already force
        context: Telemetry and toggles for this search
        evaluator: Static and terminal scoring
        ply_from_root: Distance from root (for trace indentation)

    Returns:
        Score from root_color's perspective

    Algorithm:
        1. Finished game -> +/-WIN_SCORE or 0, whatever depth remains
        2. depth <= 0 -> static evaluation
        3. color_to_move has no move -> pass, recurse with the role flipped
        4. Otherwise max/min over the moves, cutting off once beta <= alpha
    """
    context.visit()

    terminal_score = evaluator.evaluate_terminal(board, root_color)
    if terminal_score is not None:
        return terminal_score

    if depth <= 0:
        return evaluator.evaluate(board, root_color)

    opponent = color_to_move.opponent
    moves = board.legal_moves(color_to_move)
    if not moves:
        return search_value(
            board,
            opponent,
            depth - 1,
            not maximizing,
            root_color,
            alpha,
            beta,
            context,
            evaluator,
            ply_from_root + 1,
        )

    indent = "  " * ply_from_root

    if maximizing:
        max_eval = -INFINITY
        for move in moves:
            child = board.apply(move.row, move.col, color_to_move)
            eval_score = search_value(
                child,
                opponent,
                depth - 1,
                False,
                root_color,
                alpha,
                beta,
                context,
                evaluator,
                ply_from_root + 1,
            )
            max_eval = max(max_eval, eval_score)

            if context.pruning_enabled:
                alpha = max(alpha, eval_score)
                if beta <= alpha:
                    if context.trace_enabled:
                        logger.info(f"{indent}Pruned at depth {depth} after {move.notation}")
                    break

        return max_eval

    else:
        min_eval = INFINITY
        for move in moves:
            child = board.apply(move.row, move.col, color_to_move)
            eval_score = search_value(
                child,
                opponent,
                depth - 1,
                True,
                root_color,
                alpha,
                beta,
                context,
                evaluator,
                ply_from_root + 1,
            )
            min_eval = min(min_eval, eval_score)

            if context.pruning_enabled:
                beta = min(beta, eval_score)
                if beta <= alpha:
                    if context.trace_enabled:
                        logger.info(f"{indent}Pruned at depth {depth} after {move.notation}")
                    break

        return min_eval


def find_best_move(
    board: Board,
    color: Cell,
    depth: int,
    pruning_enabled: bool = True,
    trace_enabled: bool = False,
    evaluator: Optional[Evaluator] = None,
    context: Optional[SearchContext] = None,
) -> SearchResult:
    """
    Find the best move for color.

    Args:
        board: Current position
        color: Player to move
        depth: Search depth in plies (<= 0 scores each move statically)
        pruning_enabled: Use alpha-beta cutoffs
        trace_enabled: Log each root move and every cutoff
        evaluator: Position evaluation (default: HeuristicEvaluator)
        context: Telemetry object to fill in; its toggles are overwritten

    Returns:
        SearchResult(move, score, nodes_examined)
            - move: Best move, or None if color has no legal move
            - score: Score of that move, or None with no move
            - nodes_examined: Calls to search_value made by this search
    """
    color = Cell(color)
    evaluator = evaluator if evaluator is not None else HeuristicEvaluator()
    if context is None:
        context = SearchContext()
    context.pruning_enabled = pruning_enabled
    context.trace_enabled = trace_enabled
    context.reset()

    moves = board.legal_moves(color)
    if not moves:
        if trace_enabled:
            logger.info(f"{color.name} has no legal move")
        return SearchResult(None, None, context.nodes_examined)

    best_move = None
    best_score = -INFINITY
    alpha = -INFINITY
    beta = INFINITY

    for move in moves:
        child = board.apply(move.row, move.col, color)
        score = search_value(
            child,
            color.opponent,
            depth - 1,
            False,
            color,
            alpha,
            beta,
            context,
            evaluator,
        )

        if trace_enabled:
            logger.info(f"Considering move {move.notation}: score = {score}")

        if score > best_score:
            best_score = score
            best_move = move

        if pruning_enabled:
            alpha = max(alpha, score)
            if beta <= alpha:
                if trace_enabled:
                    logger.info(f"Alpha-beta cutoff at depth {depth}")
                break

    if trace_enabled:
        logger.info(f"Nodes examined: {context.nodes_examined}")
        logger.info(f"Best move: {best_move.notation}, Score: {best_score}")

    return SearchResult(best_move, int(best_score), context.nodes_examined)


class SearchEngine:
    """
    Search entry point for a driving application.

    Holds the pruning and trace toggles and the node count of the most
    recent search. Each engine keeps its own state.

    Attributes:
        evaluator: Position evaluation function
        pruning_enabled: Default for find_best_move
        trace_enabled: Log search progress
    """

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        pruning_enabled: bool = True,
        trace_enabled: bool = False,
    ):
        self.evaluator = evaluator if evaluator is not None else HeuristicEvaluator()
        self.pruning_enabled = pruning_enabled
        self.trace_enabled = trace_enabled
        self._nodes_examined = 0

    def set_pruning_enabled(self, enabled: bool) -> None:
        self.pruning_enabled = bool(enabled)

    def set_trace_enabled(self, enabled: bool) -> None:
        self.trace_enabled = bool(enabled)

    @property
    def nodes_examined(self) -> int:
        """Nodes examined by the most recent find_best_move call."""
        return self._nodes_examined

    def find_best_move(
        self,
        board: Board,
        color: Cell,
        depth: int,
        pruning_enabled: Optional[bool] = None,
    ) -> SearchResult:
        if pruning_enabled is None:
            pruning_enabled = self.pruning_enabled
        self._nodes_examined = 0
        result = find_best_move(
            board,
            color,
            depth,
            pruning_enabled=pruning_enabled,
            trace_enabled=self.trace_enabled,
            evaluator=self.evaluator,
        )
        self._nodes_examined = result.nodes_examined
        return result

    def __repr__(self) -> str:
        return (
            f"SearchEngine(evaluator={self.evaluator!r}, "
            f"pruning_enabled={self.pruning_enabled}, "
            f"trace_enabled={self.trace_enabled})"
        )
