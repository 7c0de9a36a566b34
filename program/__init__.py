"""
Program module for TicTacToe.
Stores game accounts and runs setup/play requests against them.
"""

from .config import ProgramConfig
from .errors import (
    AccountError,
    AccountNotFound,
    AccountAlreadyExists,
    AccountDecodeError,
    InvalidIdentity,
)
from .codec import encode_game, decode_game, validate_identity
from .repository import GameRepository, InMemoryGameRepository
from .instructions import TicTacToeProgram
