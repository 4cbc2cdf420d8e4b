"""
Turn sequencing for a game between humans and the AI.

GameSession owns the current board and whose turn it is. After every move
the turn goes to the opponent when the opponent can move; otherwise the
opponent passes and the mover plays again. The game is over when neither
side has a legal move.
"""

import dataclasses
import logging
from typing import List, Optional

from othello_engine.board.representation import Board, Cell, Move, Outcome
from othello_engine.console.config import GameConfig
from othello_engine.search.minimax import SearchEngine, SearchResult

logger = logging.getLogger(__name__)


class GameSession:
    """
    State of one game.

    Attributes:
        config: Current settings
        engine: Search engine used for AI moves
        board: Current position
        to_move: Player whose turn it is
        passes: Players that passed, in order
    """

    def __init__(self, config: Optional[GameConfig] = None, engine: Optional[SearchEngine] = None):
        self.config = config if config is not None else GameConfig()
        self.engine = engine if engine is not None else SearchEngine()
        self._sync_engine()
        self.restart()

    def restart(self) -> None:
        self.board = Board.initial()
        self.to_move = Cell.DARK
        self.passes: List[Cell] = []

    def configure(self, **changes) -> GameConfig:
        """
        Update settings.

        Raises:
            ValueError: If the new settings are invalid (config is unchanged)
        """
        self.config = dataclasses.replace(self.config, **changes)
        self._sync_engine()
        logger.info(f"Settings changed: {changes}")
        return self.config

    def _sync_engine(self) -> None:
        self.engine.set_pruning_enabled(self.config.pruning_enabled)
        self.engine.set_trace_enabled(self.config.trace_enabled)

    # ------------------------------------------------------------------

    @property
    def game_over(self) -> bool:
        return self.board.is_terminal()

    @property
    def winner(self) -> Optional[Outcome]:
        """Outcome of a finished game, None while it is running."""
        if not self.game_over:
            return None
        return self.board.winner()

    def is_ai(self, color: Cell) -> bool:
        return self.config.ai_dark if color is Cell.DARK else self.config.ai_light

    def is_ai_turn(self) -> bool:
        return not self.game_over and self.is_ai(self.to_move)

    def legal_moves(self) -> List[Move]:
        return self.board.legal_moves(self.to_move)

    # ------------------------------------------------------------------

    def play(self, row: int, col: int) -> Board:
        """
        Play a move for the player to move.

        Raises:
            ValueError: If the game is over
            IllegalMoveError: If the move is not legal
        """
        if self.game_over:
            raise ValueError("Game is over")
        mover = self.to_move
        self.board = self.board.apply(row, col, mover)
        logger.info(f"{mover.name} plays {Move(row, col).notation}")
        self._advance(mover)
        return self.board

    def choose_move(self) -> SearchResult:
        """
        Search for the player to move without playing the move.

        Raises:
            ValueError: If the game is over
        """
        if self.game_over:
            raise ValueError("Game is over")
        result = self.engine.find_best_move(
            self.board, self.to_move, self.config.search_depth
        )
        logger.info(
            f"Search for {self.to_move.name}: move={result.move.notation if result.move else 'None'}, "
            f"score={result.score}, nodes={result.nodes_examined}"
        )
        return result

    def ai_move(self) -> SearchResult:
        """Search and play the best move for the player to move."""
        result = self.choose_move()
        self.play(result.move.row, result.move.col)
        return result

    def _advance(self, mover: Cell) -> None:
        opponent = mover.opponent
        if self.board.has_any_move(opponent):
            self.to_move = opponent
        elif self.board.has_any_move(mover):
            self.passes.append(opponent)
            logger.info(f"{opponent.name} has no legal move and passes")
            self.to_move = mover
        else:
            self.to_move = opponent
            logger.info(f"Game over: {self.board.winner().name}, score {tuple(self.board.score())}")
