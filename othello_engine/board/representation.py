"""
Othello Board Representation

This module defines the game-state value types used by the whole engine:
cell states, moves, scores and the immutable 8x8 Board.

Board Orientation:
    - Row 0 = top row (notation rank 1)
    - Row 7 = bottom row (notation rank 8)
    - Column 0 = a-file
    - Column 7 = h-file

Notation:
    Moves are written column letter then row number, so Move(2, 3) is "d3".

Text Format:
    8 lines of 8 symbols, '.' empty, 'X' dark, 'O' light. Whitespace is
    ignored when parsing, so the rows may be spaced out for readability.

Immutability:
    A Board never changes after construction. apply() returns a new Board,
    which makes boards safe to share between the driver and the search.
"""

from enum import IntEnum
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

BOARD_SIZE = 8

# Row/column offsets of the 8 rays, scanned in this order
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)

COLUMN_LETTERS = "abcdefgh"


class Cell(IntEnum):
    """State of a single square."""

    EMPTY = 0
    DARK = 1
    LIGHT = 2

    @property
    def opponent(self) -> "Cell":
        if self is Cell.DARK:
            return Cell.LIGHT
        if self is Cell.LIGHT:
            return Cell.DARK
        raise ValueError("EMPTY is not a player color")

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Cell.EMPTY: ".", Cell.DARK: "X", Cell.LIGHT: "O"}
_FROM_SYMBOL = {symbol: cell for cell, symbol in _SYMBOLS.items()}


class Outcome(IntEnum):
    """Result of a finished game. Values match the winning Cell."""

    TIE = 0
    DARK = 1
    LIGHT = 2


class Move(NamedTuple):
    """A (row, col) coordinate pair."""

    row: int
    col: int

    @property
    def notation(self) -> str:
        return f"{COLUMN_LETTERS[self.col]}{self.row + 1}"

    @classmethod
    def from_notation(cls, text: str) -> "Move":
        """
        Parse algebraic notation such as "d3".

        Raises:
            ValueError: If text is not a square on the board
        """
        text = text.strip().lower()
        if len(text) != 2 or text[0] not in COLUMN_LETTERS or not text[1].isdigit():
            raise ValueError(f"Invalid square: {text!r}")
        row = int(text[1]) - 1
        if not 0 <= row < BOARD_SIZE:
            raise ValueError(f"Invalid square: {text!r}")
        return cls(row, COLUMN_LETTERS.index(text[0]))


class Score(NamedTuple):
    """Disc counts for both players."""

    dark: int
    light: int


class IllegalMoveError(ValueError):
    """Raised when a move that fails the sandwich rule is applied."""

    def __init__(self, row: int, col: int, color: Cell):
        self.row = row
        self.col = col
        self.color = color
        super().__init__(
            f"Illegal move for {color.name}: ({row}, {col})"
        )


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def _player(color) -> Cell:
    color = Cell(color)
    if color is Cell.EMPTY:
        raise ValueError("Expected DARK or LIGHT, got EMPTY")
    return color


class Board:
    """
    Immutable 8x8 Othello board.

    Boards compare and hash by their cells. Legal move lists are memoized
    per color on the instance; this is safe because the cells never change.

    Attributes:
        cells: Tuple of 8 row tuples of Cell values
    """

    __slots__ = ("_cells", "_legal")

    def __init__(self, cells: Iterable[Iterable[int]]):
        """
        Build a board from 8 rows of 8 cell values.

        Raises:
            ValueError: If the grid is not 8x8 or holds unknown cell values
        """
        rows = tuple(tuple(Cell(value) for value in row) for row in cells)
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        self._cells = rows
        self._legal: Dict[Cell, List[Move]] = {}

    @classmethod
    def _trusted(cls, rows: Tuple[Tuple[Cell, ...], ...]) -> "Board":
        board = cls.__new__(cls)
        board._cells = rows
        board._legal = {}
        return board

    @classmethod
    def initial(cls) -> "Board":
        """Standard starting layout: light on d4/e5, dark on e4/d5."""
        grid = [[Cell.EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        grid[3][3] = grid[4][4] = Cell.LIGHT
        grid[3][4] = grid[4][3] = Cell.DARK
        return cls(grid)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """
        Parse the text format ('.', 'X', 'O'; whitespace ignored).

        Raises:
            ValueError: On unknown symbols or a symbol count other than 64
        """
        symbols = [ch for ch in text if not ch.isspace()]
        if len(symbols) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(
                f"Expected {BOARD_SIZE * BOARD_SIZE} cells, got {len(symbols)}"
            )
        try:
            values = [_FROM_SYMBOL[ch.upper()] for ch in symbols]
        except KeyError as e:
            raise ValueError(f"Unknown board symbol: {e.args[0]!r}") from None
        return cls(
            values[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        )

    @property
    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        return self._cells

    def get(self, row: int, col: int) -> Cell:
        return self._cells[row][col]

    def to_array(self) -> np.ndarray:
        """Read-only (8, 8) int8 array of cell values."""
        array = np.array(self._cells, dtype=np.int8)
        array.flags.writeable = False
        return array

    def to_string(self) -> str:
        return "\n".join("".join(cell.symbol for cell in row) for row in self._cells)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def _ray(self, row: int, col: int, dr: int, dc: int, color: Cell) -> List[Move]:
        """Opponent cells sandwiched along one ray, or [] if the ray fails."""
        opponent = color.opponent
        captured = []
        r, c = row + dr, col + dc
        while _on_board(r, c) and self._cells[r][c] == opponent:
            captured.append(Move(r, c))
            r += dr
            c += dc
        if captured and _on_board(r, c) and self._cells[r][c] == color:
            return captured
        return []

    def is_legal_move(self, row: int, col: int, color: Cell) -> bool:
        """
        Check the sandwich rule for placing color at (row, col).

        The target must be empty, and at least one of the 8 rays must run
        over one or more opponent discs and end on a disc of color.

        Args:
            row: Row index (0-7)
            col: Column index (0-7)
            color: Player to move (DARK or LIGHT)

        Returns:
            bool: True if the move is legal
        """
        color = _player(color)
        if not _on_board(row, col) or self._cells[row][col] != Cell.EMPTY:
            return False
        return any(self._ray(row, col, dr, dc, color) for dr, dc in DIRECTIONS)

    def flips(self, row: int, col: int, color: Cell) -> List[Move]:
        """
        Cells that placing color at (row, col) would flip.

        Returns:
            List of Moves in direction order; empty if the move is illegal
        """
        color = _player(color)
        if not _on_board(row, col) or self._cells[row][col] != Cell.EMPTY:
            return []
        flipped = []
        for dr, dc in DIRECTIONS:
            flipped.extend(self._ray(row, col, dr, dc, color))
        return flipped

    def legal_moves(self, color: Cell) -> List[Move]:
        """
        All legal moves for color in row-major order.

        Row-major order matters: the search keeps the first of several
        equally scored moves.
        """
        color = _player(color)
        moves = self._legal.get(color)
        if moves is None:
            moves = [
                Move(row, col)
                for row in range(BOARD_SIZE)
                for col in range(BOARD_SIZE)
                if self.is_legal_move(row, col, color)
            ]
            self._legal[color] = moves
        return list(moves)

    def has_any_move(self, color: Cell) -> bool:
        color = _player(color)
        if color in self._legal:
            return bool(self._legal[color])
        return any(
            self.is_legal_move(row, col, color)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
        )

    def is_terminal(self, color: Optional[Cell] = None) -> bool:
        """
        True when neither player has a legal move.

        A player without moves only passes; the game ends when both are
        stuck. color is accepted for call-site symmetry and does not change
        the answer.
        """
        return not self.has_any_move(Cell.DARK) and not self.has_any_move(Cell.LIGHT)

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def apply(self, row: int, col: int, color: Cell) -> "Board":
        """
        Place color at (row, col) and flip every sandwiched disc.

        Args:
            row: Row index (0-7)
            col: Column index (0-7)
            color: Player making the move

        Returns:
            Board: New board after the move (self is unchanged)

        Raises:
            IllegalMoveError: If the move fails the sandwich rule
        """
        color = _player(color)
        flipped = self.flips(row, col, color)
        if not flipped:
            raise IllegalMoveError(row, col, color)

        grid = [list(cells) for cells in self._cells]
        grid[row][col] = color
        for r, c in flipped:
            grid[r][c] = color
        return Board._trusted(tuple(tuple(cells) for cells in grid))

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def count(self, color: Cell) -> int:
        return sum(row.count(color) for row in self._cells)

    @property
    def occupied(self) -> int:
        return BOARD_SIZE * BOARD_SIZE - self.count(Cell.EMPTY)

    def score(self) -> Score:
        return Score(dark=self.count(Cell.DARK), light=self.count(Cell.LIGHT))

    def winner(self) -> Outcome:
        """Strictly more discs wins; equal counts is a tie."""
        dark, light = self.score()
        if dark > light:
            return Outcome.DARK
        if light > dark:
            return Outcome.LIGHT
        return Outcome.TIE

    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __setattr__(self, name, value):
        if hasattr(self, "_cells") and name == "_cells":
            raise AttributeError("Board is immutable")
        object.__setattr__(self, name, value)

    def __str__(self) -> str:
        lines = ["  " + " ".join(COLUMN_LETTERS)]
        for index, row in enumerate(self._cells):
            lines.append(f"{index + 1} " + " ".join(cell.symbol for cell in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        dark, light = self.score()
        return f"Board(dark={dark}, light={light})"


# ============================================================================
# Functional interface
# ============================================================================

def initial_board() -> Board:
    return Board.initial()


def is_legal_move(board: Board, row: int, col: int, color: Cell) -> bool:
    return board.is_legal_move(row, col, color)


def legal_moves(board: Board, color: Cell) -> List[Move]:
    return board.legal_moves(color)


def apply_move(board: Board, row: int, col: int, color: Cell) -> Board:
    return board.apply(row, col, color)


def is_terminal(board: Board) -> bool:
    return board.is_terminal()


def score(board: Board) -> Score:
    return board.score()


def winner(board: Board) -> Outcome:
    return board.winner()


def moves_to_notation(moves: Sequence[Move]) -> str:
    """Space-separated notation for a move list, e.g. "d3 c4 f5 e6"."""
    return " ".join(move.notation for move in moves)
