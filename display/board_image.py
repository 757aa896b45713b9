"""
Board image rendering for TicTacToe.
Draws the board with OpenCV so it can be saved or shown in a window.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from rules import Board, BoardConfig, Coordinate, Symbol

from .config import DisplayConfig


class BoardImageRenderer:
    """
    Renders a board as a BGR image.

    The grid sits in the bottom-right of the image, leaving a margin on
    the top and left for the column letters and row numbers.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config or DisplayConfig()

        size = self.config.BOARD_OUTPUT_SIZE
        self.margin = self.config.LABEL_MARGIN
        self.cell_size = (size - self.margin) // BoardConfig.BOARD_SIZE
        self.grid_size = self.cell_size * BoardConfig.BOARD_SIZE

    def render(self, board: Board) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: The board to draw. It is only read.

        Returns:
            BGR image of shape (size, size, 3).
        """
        size = self.config.BOARD_OUTPUT_SIZE
        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_grid(image)
        self._draw_labels(image)

        for r, row in enumerate(board.rows()):
            for c, cell in enumerate(row):
                center = self._cell_center(r, c)
                if cell.value is Symbol.X:
                    self._draw_x(image, center)
                elif cell.value is Symbol.O:
                    self._draw_o(image, center)

        line = board.winning_line()
        if line is not None:
            start = self._coordinate_center(line[0])
            end = self._coordinate_center(line[-1])
            cv2.line(
                image, start, end,
                self.config.WIN_LINE_COLOR,
                self.config.WIN_LINE_THICKNESS
            )

        return image

    def save(self, board: Board, path: str) -> bool:
        """
        Render the board and write it to an image file.

        Returns:
            True if OpenCV wrote the file.
        """
        return bool(cv2.imwrite(path, self.render(board)))

    def _draw_grid(self, image: np.ndarray):
        m = self.margin
        end = m + self.grid_size

        for i in range(1, BoardConfig.BOARD_SIZE):
            offset = m + i * self.cell_size
            # Vertical lines
            cv2.line(image, (offset, m), (offset, end),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)
            # Horizontal lines
            cv2.line(image, (m, offset), (end, offset),
                     self.config.GRID_COLOR, self.config.GRID_THICKNESS)

        # Border
        cv2.rectangle(image, (m, m), (end - 1, end - 1),
                      self.config.GRID_COLOR, self.config.GRID_THICKNESS)

    def _draw_labels(self, image: np.ndarray):
        font = cv2.FONT_HERSHEY_SIMPLEX
        half = self.cell_size // 2

        for i, label in enumerate(BoardConfig.COLUMNS):
            x = self.margin + i * self.cell_size + half - 8
            cv2.putText(image, label, (x, self.margin - 12), font,
                        self.config.FONT_SCALE, self.config.LABEL_COLOR, 2)

        for i, number in enumerate(BoardConfig.ROWS):
            y = self.margin + i * self.cell_size + half + 8
            cv2.putText(image, str(number), (10, y), font,
                        self.config.FONT_SCALE, self.config.LABEL_COLOR, 2)

    def _draw_x(self, image: np.ndarray, center: Tuple[int, int]):
        cx, cy = center
        half = self._mark_half_size()
        cv2.line(image, (cx - half, cy - half), (cx + half, cy + half),
                 self.config.X_COLOR, self.config.MARK_THICKNESS)
        cv2.line(image, (cx - half, cy + half), (cx + half, cy - half),
                 self.config.X_COLOR, self.config.MARK_THICKNESS)

    def _draw_o(self, image: np.ndarray, center: Tuple[int, int]):
        cv2.circle(image, center, self._mark_half_size(),
                   self.config.O_COLOR, self.config.MARK_THICKNESS)

    def _mark_half_size(self) -> int:
        return int(self.cell_size * self.config.MARK_SCALE / 2)

    def _cell_center(self, row_index: int, col_index: int) -> Tuple[int, int]:
        """Pixel (x, y) at the middle of a grid cell."""
        half = self.cell_size // 2
        return (
            self.margin + col_index * self.cell_size + half,
            self.margin + row_index * self.cell_size + half,
        )

    def _coordinate_center(self, coord: Coordinate) -> Tuple[int, int]:
        return self._cell_center(
            BoardConfig.ROWS.index(coord.row),
            BoardConfig.COLUMNS.index(coord.column)
        )
