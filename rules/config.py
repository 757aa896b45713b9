"""
Board configuration for the TicTacToe rules engine.
Grid size and the labels used to address cells.
"""


class BoardConfig:
    """
    Fixed board layout.

    Cells are addressed as (column, row), e.g. ("B", 2) for the center.
    """

    # ==================== GRID SETTINGS ====================
    # TicTacToe is always a 3x3 grid
    BOARD_SIZE = 3

    # Column labels, left to right
    COLUMNS = ("A", "B", "C")

    # Row numbers, top to bottom
    ROWS = (1, 2, 3)

    # Number of cells in the grid
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE
