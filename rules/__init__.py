"""
Rules engine for TicTacToe.
Handles the board, move validation, turn order, and win/draw detection.
"""

from .board import Board
from .cell import Cell, Symbol
from .config import BoardConfig
from .coordinate import Coordinate
from .errors import (
    InvalidCoordinates,
    InvalidMove,
    InvalidValue,
    MoveRejection,
    TicTacToeError,
)
from .move_validator import MoveValidator
from .win_checker import GameState, GameStatus, WinChecker

X = Symbol.X
O = Symbol.O
EMPTY = Symbol.EMPTY
