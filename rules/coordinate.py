"""
Coordinate handling for the TicTacToe board.
Maps (column, row) labels like ("A", 1) to grid indices.
"""

from numbers import Integral
from typing import NamedTuple, Tuple

from .config import BoardConfig
from .errors import InvalidCoordinates


class Coordinate(NamedTuple):
    """A (column, row) address, e.g. Coordinate("B", 2) for the center."""
    column: str
    row: int

    def __str__(self) -> str:
        return f"{self.column}{self.row}"


def resolve(coord: Tuple[str, int]) -> Tuple[int, int]:
    """
    Turn a (column, row) pair into (row_index, col_index) grid indices.

    Args:
        coord: Column label and row number.

    Returns:
        Zero-based (row_index, col_index).

    Raises:
        InvalidCoordinates: If the column is not A-C or the row is not 1-3.
    """
    try:
        column, row = coord
    except (TypeError, ValueError):
        raise InvalidCoordinates(coord, None) from None

    # Rows are whole numbers only: True and 1.0 are not row 1
    if isinstance(row, bool) or not isinstance(row, Integral):
        raise InvalidCoordinates(column, row)

    if column not in BoardConfig.COLUMNS or row not in BoardConfig.ROWS:
        raise InvalidCoordinates(column, row)

    return BoardConfig.ROWS.index(row), BoardConfig.COLUMNS.index(column)


def from_indices(row_index: int, col_index: int) -> Coordinate:
    """Inverse of resolve()."""
    return Coordinate(BoardConfig.COLUMNS[col_index], BoardConfig.ROWS[row_index])
