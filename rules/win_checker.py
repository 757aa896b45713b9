"""
Win checker for the TicTacToe rules engine.
Decides whether a board is won, drawn, or still in play.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterator, List, Optional, Sequence, Tuple

from .cell import Cell, Symbol
from .coordinate import Coordinate, from_indices

if TYPE_CHECKING:
    from .board import Board


class GameState(Enum):
    """Where a game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameStatus:
    """
    Result of checking a board.

    winner is Symbol.EMPTY unless someone has three in a row.
    """
    is_over: bool
    winner: Symbol = Symbol.EMPTY

    @property
    def state(self) -> GameState:
        if not self.is_over:
            return GameState.IN_PROGRESS
        if self.winner is Symbol.EMPTY:
            return GameState.DRAWN
        return GameState.WON


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Lines are scanned columns first, then rows, then the two diagonals.
    The first complete line found decides the winner, which only matters
    for boards that legal play cannot reach (two winning lines of
    different symbols).
    """

    # Winning lines as (row_index, col_index) positions, in scan order
    WINNING_LINES = [
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def _scan(self, board: "Board") -> Iterator[Tuple[List[Coordinate], List[Cell]]]:
        """Yield each line's coordinates and cells, in WINNING_LINES order."""
        for line in self.WINNING_LINES:
            coords = [from_indices(row, col) for row, col in line]
            yield coords, [board.read(coord) for coord in coords]

    def check_winner(self, board: "Board") -> Symbol:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning symbol, or Symbol.EMPTY if nobody has won.
        """
        for _, cells in self._scan(board):
            if self._is_complete(cells):
                return cells[0].value
        return Symbol.EMPTY

    def _is_complete(self, line: Sequence[Cell]) -> bool:
        """True if all 3 cells hold the same non-empty symbol."""
        first, second, third = line
        return first == second == third and not first.is_empty

    def _is_full(self, board: "Board") -> bool:
        return not any(cell.is_empty for cell in board.cells())

    def check_draw(self, board: "Board") -> bool:
        """
        Check if the game is a draw: no winner and no empty cells left.
        """
        return self.check_winner(board) is Symbol.EMPTY and self._is_full(board)

    def status(self, board: "Board") -> GameStatus:
        """
        Work out the terminal status of a board.

        Args:
            board: The board to check.

        Returns:
            GameStatus(is_over, winner). A draw is is_over=True with
            winner=Symbol.EMPTY.
        """
        winner = self.check_winner(board)
        if winner is not Symbol.EMPTY:
            return GameStatus(is_over=True, winner=winner)

        return GameStatus(is_over=self._is_full(board), winner=Symbol.EMPTY)

    def get_winning_line(self, board: "Board") -> Optional[List[Coordinate]]:
        """
        Get the winning line if there is one.

        Uses the same scan as check_winner(), so it always agrees with
        status().

        Args:
            board: The board to check.

        Returns:
            The winning line as a list of Coordinates, or None.
        """
        for coords, cells in self._scan(board):
            if self._is_complete(cells):
                return coords
        return None
