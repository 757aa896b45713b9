"""
Exceptions raised by the TicTacToe rules engine.

Every rejected action raises one of these. None of them is fatal:
a driver catches TicTacToeError, shows it, and asks for another move.
"""

from enum import Enum
from typing import Any


class MoveRejection(Enum):
    """Why a write was refused."""
    OCCUPIED = "occupied"                # target cell already holds X or O
    EMPTY_SYMBOL = "empty_symbol"        # tried to write a blank
    OUT_OF_SEQUENCE = "out_of_sequence"  # not this symbol's turn


class TicTacToeError(Exception):
    """Base class for all rules engine errors."""


class InvalidValue(TicTacToeError):
    """A cell was built from something other than X, O or blank."""

    def __init__(self, symbol: Any):
        self.symbol = symbol
        super().__init__(f"Invalid value {symbol!r}: must be X, O or blank")


class InvalidCoordinates(TicTacToeError):
    """A coordinate pair points outside the 3x3 grid."""

    def __init__(self, column: Any, row: Any):
        self.column = column
        self.row = row
        super().__init__(
            f"Invalid coordinates ({column!r}, {row!r}): "
            f"column must be A-C and row 1-3"
        )


class InvalidMove(TicTacToeError):
    """A well-formed write that breaks the rules of the game."""

    def __init__(self, reason: MoveRejection, message: str):
        self.reason = reason
        self.message = message
        super().__init__(message)
