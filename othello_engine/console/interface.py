"""
Console Game Interface

This module implements a line-oriented command protocol for playing Othello
against the engine from a terminal (or from another program over a pipe).

Commands Supported:
    - new: Start a new game
    - board: Show the board and whose turn it is
    - moves: List legal moves for the player to move
    - play <square>: Play a move, e.g. "play d3"
    - go: Let the engine play for the player to move
    - depth <n>: Set the search depth
    - pruning on|off: Toggle alpha-beta pruning
    - trace on|off: Toggle search tracing (written to the log file)
    - ai dark|light on|off: Choose which players the engine controls
    - score: Show disc counts
    - help: List commands
    - quit: Exit

After each human move the engine answers automatically for every AI
player whose turn it is.

Output:
    info depth 4 score 12 nodes 345 time 20
    bestmove d3
"""

import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from othello_engine.board.representation import Cell, Move, Outcome, moves_to_notation
from othello_engine.console.config import GameConfig
from othello_engine.console.session import GameSession

DEFAULT_LOG_FILE = Path.home() / ".othello_engine" / "engine.log"

COMMANDS = (
    "new", "board", "moves", "play <square>", "go", "depth <n>",
    "pruning on|off", "trace on|off", "ai dark|light on|off", "score",
    "help", "quit",
)


def setup_logger(debug=False, log_file: Optional[Path] = None):
    """
    Setup file-based logger for game debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Destination (default: ~/.othello_engine/engine.log)

    Returns:
        Configured logger instance
    """
    log_file = Path(log_file) if log_file is not None else DEFAULT_LOG_FILE
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("othello_engine")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(
        '%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


def _parse_switch(token: str) -> bool:
    token = token.lower()
    if token in ("on", "true", "1", "yes"):
        return True
    if token in ("off", "false", "0", "no"):
        return False
    raise ValueError(f"Expected on/off, got {token!r}")


class ConsoleInterface:
    """
    Text command loop around a GameSession.

    Attributes:
        session: Game being played
        logger: Session logger (file based)
        running: False once 'quit' has been handled
    """

    def __init__(self, config: Optional[GameConfig] = None, debug=False, log_file: Optional[Path] = None):
        self.session = GameSession(config)
        self.running = True

        self.logger = setup_logger(debug=debug, log_file=log_file)
        self.logger.info("=== Othello Engine Started ===")
        self.logger.info(f"Configuration: {self.session.config!r}")

    def run(self):
        """
        Main command loop.

        Reads commands from stdin until 'quit' or end of input. A command
        that fails is reported on stderr and the loop continues.
        """
        while self.running:
            try:
                command = input().strip()
            except EOFError:
                self.logger.info("EOF received, shutting down")
                break

            if not command:
                continue

            self.logger.debug(f">>> {command}")
            try:
                self.handle(command)
            except ValueError as e:
                self.logger.error(f"Command error: {e}")
                print(f"# Error: {e}", file=sys.stderr)

    def handle(self, command: str):
        """
        Dispatch one command line.

        Raises:
            ValueError: On unknown commands or bad arguments
        """
        tokens = command.split()
        cmd = tokens[0].lower()
        args = tokens[1:]

        if cmd == "new":
            self.handle_new()
        elif cmd == "board":
            self.handle_board()
        elif cmd == "moves":
            self.handle_moves()
        elif cmd == "play":
            self.handle_play(args)
        elif cmd == "go":
            self.handle_go()
        elif cmd == "depth":
            self.handle_depth(args)
        elif cmd == "pruning":
            self.handle_pruning(args)
        elif cmd == "trace":
            self.handle_trace(args)
        elif cmd == "ai":
            self.handle_ai(args)
        elif cmd == "score":
            self.handle_score()
        elif cmd == "help":
            self.handle_help()
        elif cmd == "quit":
            self.handle_quit()
        else:
            raise ValueError(f"Unknown command: {cmd}")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def status(self) -> str:
        session = self.session
        if session.game_over:
            dark, light = session.board.score()
            outcome = session.winner
            if outcome is Outcome.TIE:
                return f"Game over: tie {dark}-{light}"
            return f"Game over: {outcome.name} wins {dark}-{light}"
        return f"{session.to_move.name} to move"

    def _show(self):
        print(self.session.board)
        print(self.status())
        sys.stdout.flush()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def handle_new(self):
        self.logger.info("Handling: new")
        self.session.restart()
        self._play_ai_turns()
        self._show()

    def handle_board(self):
        self._show()

    def handle_moves(self):
        moves = self.session.legal_moves()
        print(f"moves {moves_to_notation(moves)}".rstrip())
        sys.stdout.flush()

    def handle_play(self, args: List[str]):
        """
        Handle 'play <square>' - human move.

        Raises:
            ValueError: On a missing/invalid square or an illegal move
        """
        if len(args) != 1:
            raise ValueError("Usage: play <square>")
        move = Move.from_notation(args[0])
        self.logger.info(f"Handling: play {move.notation}")

        mover = self.session.to_move
        self.session.play(move.row, move.col)
        self._report_pass(mover)
        self._play_ai_turns()
        self._show()

    def handle_go(self):
        """Handle 'go' - engine plays for the player to move."""
        self.logger.info("Handling: go")
        self._engine_move()
        self._play_ai_turns()
        self._show()

    def handle_depth(self, args: List[str]):
        if len(args) != 1:
            raise ValueError("Usage: depth <n>")
        try:
            depth = int(args[0])
        except ValueError:
            raise ValueError(f"Depth must be an integer, got {args[0]!r}") from None
        self.session.configure(search_depth=depth)
        print(f"depth {depth}")

    def handle_pruning(self, args: List[str]):
        if len(args) != 1:
            raise ValueError("Usage: pruning on|off")
        self.session.configure(pruning_enabled=_parse_switch(args[0]))
        print(f"pruning {'on' if self.session.config.pruning_enabled else 'off'}")

    def handle_trace(self, args: List[str]):
        if len(args) != 1:
            raise ValueError("Usage: trace on|off")
        self.session.configure(trace_enabled=_parse_switch(args[0]))
        print(f"trace {'on' if self.session.config.trace_enabled else 'off'}")

    def handle_ai(self, args: List[str]):
        if len(args) != 2 or args[0].lower() not in ("dark", "light"):
            raise ValueError("Usage: ai dark|light on|off")
        field = f"ai_{args[0].lower()}"
        self.session.configure(**{field: _parse_switch(args[1])})
        print(f"ai {args[0].lower()} {'on' if getattr(self.session.config, field) else 'off'}")
        self._play_ai_turns()

    def handle_score(self):
        dark, light = self.session.board.score()
        print(f"score dark {dark} light {light}")

    def handle_help(self):
        print("commands: " + ", ".join(COMMANDS))

    def handle_quit(self):
        """Handle 'quit' command - stop the loop."""
        self.logger.info("Handling: quit - shutting down")
        self.logger.info("=== Othello Engine Stopped ===")
        self.running = False

    # ------------------------------------------------------------------
    # Engine turns
    # ------------------------------------------------------------------

    def _engine_move(self):
        session = self.session
        mover = session.to_move
        start_time = time.time()

        result = session.choose_move()
        elapsed_ms = int((time.time() - start_time) * 1000)

        delay = session.config.thinking_delay()
        if delay:
            time.sleep(delay)

        session.play(result.move.row, result.move.col)

        info_msg = (
            f"info depth {session.config.search_depth} score {result.score} "
            f"nodes {result.nodes_examined} time {elapsed_ms}"
        )
        bestmove_msg = f"bestmove {result.move.notation}"
        print(info_msg)
        print(bestmove_msg)
        sys.stdout.flush()

        self.logger.debug(f"<<< {info_msg}")
        self.logger.debug(f"<<< {bestmove_msg}")
        self._report_pass(mover)
        return result

    def _play_ai_turns(self):
        while self.session.is_ai_turn():
            self._engine_move()

    def _report_pass(self, mover: Cell):
        # The mover keeps the turn only when the opponent had to pass
        session = self.session
        if not session.game_over and session.to_move is mover:
            print(f"info pass {mover.opponent.name.lower()}")
