"""
Display configuration for TicTacToe.
Settings for the console table and the board image.
"""


class DisplayConfig:
    """
    Configuration class for rendering settings.
    Change these values to restyle the output.
    """

    # ==================== TABLE SETTINGS ====================
    # Draw a separator line after these row numbers
    # (a rule under the column headers is always drawn)
    SEPARATOR_AFTER_ROWS = (1,)

    # Header for the row-number column
    ROW_NUMBER_HEADER = "#"

    # ==================== IMAGE SETTINGS ====================
    # Output size for the board image (pixels, square)
    BOARD_OUTPUT_SIZE = 600

    # Space around the grid for the A-C and 1-3 labels
    LABEL_MARGIN = 40

    GRID_THICKNESS = 3
    MARK_THICKNESS = 8
    WIN_LINE_THICKNESS = 12

    # How much of a cell an X or O fills (0-1)
    MARK_SCALE = 0.6

    FONT_SCALE = 0.9

    # Colors are BGR
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    LABEL_COLOR = (80, 80, 80)
    X_COLOR = (255, 0, 0)      # Blue
    O_COLOR = (0, 0, 255)      # Red
    WIN_LINE_COLOR = (0, 200, 0)

    # Where the driver saves the final board if no path is given
    DEFAULT_IMAGE_PATH = "tictactoe_board.png"
