"""
Move validator for the TicTacToe rules engine.
Checks that a write follows the rules before the board changes.
"""

from typing import TYPE_CHECKING, Optional, Tuple

from .cell import Cell, Symbol
from .errors import InvalidMove, MoveRejection

if TYPE_CHECKING:
    from .board import Board


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on empty cells
    2. Can only place X or O, never a blank
    3. X moves first, then the players alternate

    Whose turn it is comes from counting the symbols on the board,
    so the board itself is the only record of play.
    """

    def count_symbols(self, board: "Board") -> Tuple[int, int]:
        """
        Count the symbols on the board.

        Returns:
            (number of X cells, number of O cells).
        """
        xs = os_ = 0
        for cell in board.cells():
            if cell.value is Symbol.X:
                xs += 1
            elif cell.value is Symbol.O:
                os_ += 1
        return xs, os_

    def next_symbol(self, board: "Board") -> Optional[Symbol]:
        """
        Get the symbol that moves next.

        Returns:
            Symbol.X or Symbol.O, or None if the counts cannot come
            from legal play.
        """
        xs, os_ = self.count_symbols(board)
        if xs == os_:
            return Symbol.X
        if xs == os_ + 1:
            return Symbol.O
        return None

    def validate_move(self, board: "Board", current: Cell, candidate: Cell):
        """
        Validate writing candidate over current.

        Args:
            board: The board before the write.
            current: The cell now in the target slot.
            candidate: The cell that would replace it.

        Raises:
            InvalidMove: If the slot is taken, the candidate is blank,
                or it is not the candidate's turn.
        """
        if not current.is_empty:
            raise InvalidMove(
                MoveRejection.OCCUPIED,
                f"Cell already contains a value {current}"
            )

        if candidate.is_empty:
            raise InvalidMove(
                MoveRejection.EMPTY_SYMBOL,
                "Can only choose X or O"
            )

        if candidate.value is not self.next_symbol(board):
            raise InvalidMove(
                MoveRejection.OUT_OF_SEQUENCE,
                f"Invalid move sequence {candidate}"
            )
