"""
Cell values for the TicTacToe board.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidValue


class Symbol(str, Enum):
    """The three things a cell can hold."""
    X = "X"
    O = "O"
    EMPTY = " "

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Cell:
    """
    An immutable cell value.

    Two cells are equal (and hash the same) when they hold the same symbol.
    To change a square, build a new Cell and put it in the board slot.
    """
    value: Symbol = Symbol.EMPTY

    def __post_init__(self):
        try:
            symbol = Symbol(self.value)
        except ValueError:
            raise InvalidValue(self.value) from None
        # Normalise raw text ("X") to the enum member
        object.__setattr__(self, "value", symbol)

    @property
    def is_empty(self) -> bool:
        return self.value is Symbol.EMPTY

    def __str__(self) -> str:
        return self.value.value


SymbolLike = Union[Symbol, str]
