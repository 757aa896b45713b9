"""
The TicTacToe board.

A fixed 3x3 grid of Cells addressed by (column, row), e.g. ("A", 1) for
the top-left corner. All writes go through validation; nothing is changed
until every check has passed.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, Symbol, SymbolLike
from .config import BoardConfig
from .coordinate import Coordinate, from_indices, resolve
from .move_validator import MoveValidator
from .win_checker import GameStatus, WinChecker


class Board:
    """
    A TicTacToe board.

    Cells are stored row-major in a 3x3 numpy object array, so
    self._grid[row_index, col_index] is the cell at that position.
    """

    def __init__(self):
        size = BoardConfig.BOARD_SIZE
        self._grid = np.empty((size, size), dtype=object)
        for row in range(size):
            for col in range(size):
                self._grid[row, col] = Cell()

        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[SymbolLike]]) -> "Board":
        """
        Build a board from 3 rows of 3 symbols.

        The turn order is not checked, so this can describe positions that
        legal play never reaches. Each symbol is still validated.

        Args:
            rows: Rows 1-3, each listing columns A-C.

        Raises:
            ValueError: If rows is not 3x3.
            InvalidValue: If a symbol is not X, O or blank.
        """
        size = BoardConfig.BOARD_SIZE
        if len(rows) != size or any(len(row) != size for row in rows):
            raise ValueError(f"Board must be {size}x{size}")

        board = cls()
        for r, row in enumerate(rows):
            for c, symbol in enumerate(row):
                board._grid[r, c] = Cell(symbol)
        return board

    # ==================== CELL ACCESS ====================

    def read(self, coord: Tuple[str, int]) -> Cell:
        """
        Get the cell at a coordinate.

        Args:
            coord: (column, row) pair, column A-C and row 1-3.

        Raises:
            InvalidCoordinates: If the coordinate is off the board.
        """
        row, col = resolve(coord)
        return self._grid[row, col]

    def write(self, symbol: SymbolLike, coord: Tuple[str, int]) -> "Board":
        """
        Place a symbol on the board.

        Checks run in this order: the symbol, the coordinate, the target
        cell being empty, the symbol not being blank, and the turn order.

        Args:
            symbol: X or O.
            coord: (column, row) pair.

        Returns:
            This board, updated.

        Raises:
            InvalidValue: If symbol is not X, O or blank.
            InvalidCoordinates: If the coordinate is off the board.
            InvalidMove: If the cell is taken, the symbol is blank, or it
                is not that symbol's turn.
        """
        candidate = Cell(symbol)
        row, col = resolve(coord)
        current = self._grid[row, col]

        self._validator.validate_move(self, current, candidate)

        self._grid[row, col] = candidate
        return self

    def cells(self) -> Iterator[Cell]:
        """All 9 cells, row by row."""
        return iter(self._grid.flat)

    def empty_coordinates(self) -> List[Coordinate]:
        """
        Get all empty cells on the board.

        Returns:
            List of Coordinates, row by row.
        """
        size = BoardConfig.BOARD_SIZE
        return [
            from_indices(row, col)
            for row in range(size)
            for col in range(size)
            if self._grid[row, col].is_empty
        ]

    # ==================== LINES ====================

    def rows(self) -> List[List[Cell]]:
        """Rows 1-3, each in column order A-C."""
        return [list(row) for row in self._grid]

    def columns(self) -> List[List[Cell]]:
        """Columns A-C, each in row order 1-3."""
        return [list(col) for col in self._grid.T]

    def diagonals(self) -> List[List[Cell]]:
        """The A1-B2-C3 diagonal, then C1-B2-A3."""
        return [
            list(np.diagonal(self._grid)),
            list(np.diagonal(np.fliplr(self._grid))),
        ]

    # ==================== GAME STATUS ====================

    def status(self) -> GameStatus:
        """Check whether the game is won, drawn, or still going."""
        return self._win_checker.status(self)

    def winning_line(self) -> Optional[List[Coordinate]]:
        """Coordinates of the line that won the game, or None."""
        return self._win_checker.get_winning_line(self)

    def next_symbol(self) -> Optional[Symbol]:
        """The symbol whose turn it is, worked out from the cells."""
        return self._validator.next_symbol(self)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        new_board = type(self)()
        new_board._grid = self._grid.copy()
        return new_board

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._grid, other._grid))

    __hash__ = None

    def __repr__(self) -> str:
        rows = ["".join(str(cell) for cell in row) for row in self._grid]
        return f"Board({rows!r})"
