"""
Console rendering for the TicTacToe board.
"""

from typing import List, Optional

from rules import Board, BoardConfig, Cell

from .config import DisplayConfig


class TextRenderer:
    """
    Draws a board as a box-drawn table.

    Example (default config, X at A1, O at B2):

        ┌───┬───┬───┬───┐
        │ # │ A │ B │ C │
        ├───┼───┼───┼───┤
        │ 1 │ X │   │   │
        ├───┼───┼───┼───┤
        │ 2 │   │ O │   │
        │ 3 │   │   │   │
        └───┴───┴───┴───┘
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

    def render_cell(self, cell: Cell) -> str:
        """Single-character view of a cell: its raw symbol."""
        return str(cell)

    def render_board(self, board: Board) -> str:
        """
        Get a text representation of the board.

        Args:
            board: The board to draw. It is only read.

        Returns:
            Multi-line string, no trailing newline.
        """
        columns = len(BoardConfig.COLUMNS) + 1  # plus the row-number column
        lines: List[str] = []

        lines.append(self._rule("┌", "┬", "┐", columns))
        lines.append(self._row([self.config.ROW_NUMBER_HEADER] + list(BoardConfig.COLUMNS)))
        lines.append(self._rule("├", "┼", "┤", columns))

        last_row = BoardConfig.ROWS[-1]
        for number, cells in zip(BoardConfig.ROWS, board.rows()):
            lines.append(self._row([str(number)] + [self.render_cell(c) for c in cells]))

            if number in self.config.SEPARATOR_AFTER_ROWS and number != last_row:
                lines.append(self._rule("├", "┼", "┤", columns))

        lines.append(self._rule("└", "┴", "┘", columns))
        return "\n".join(lines)

    def _rule(self, left: str, middle: str, right: str, count: int) -> str:
        return left + middle.join(["───"] * count) + right

    def _row(self, values: List[str]) -> str:
        return "│" + "│".join(f" {value} " for value in values) + "│"
