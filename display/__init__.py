"""
Display module for TicTacToe.
Renders boards as console tables and as images.
"""

from .config import DisplayConfig
from .text_renderer import TextRenderer
from .board_image import BoardImageRenderer
