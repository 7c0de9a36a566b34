"""
Logic module for TicTacToe.
Handles game state, move rules and win detection.
"""

from .board import BOARD_SIZE, Cell, Tile
from .errors import (
    GameError,
    GameAlreadyOver,
    GameAlreadyStarted,
    GameNotStarted,
    NotPlayersTurn,
    TileAlreadySet,
    TileOutOfBounds,
    error_from_code,
)
from .outcome import Active, GameState, Tie, Won, is_terminal
from .game_state import Game
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
