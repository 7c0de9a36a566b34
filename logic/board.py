"""
Board primitives for the TicTacToe rules engine.
A 3x3 grid of cells, each one empty or holding a player's sign.
"""

from dataclasses import dataclass
from enum import IntEnum

import numpy as np


# TicTacToe is a 3x3 grid
BOARD_SIZE = 3


class Cell(IntEnum):
    """
    What a board cell holds.

    X and O are the two signs: X belongs to the first player,
    O to the second.
    """
    EMPTY = 0
    X = 1
    O = 2

    @classmethod
    def from_player_index(cls, index: int) -> "Cell":
        """Get the sign written by the player at this index (0 or 1)."""
        return cls.X if index == 0 else cls.O

    @property
    def symbol(self) -> str:
        return " " if self is Cell.EMPTY else self.name


@dataclass(frozen=True)
class Tile:
    """
    A move target on the board.
    """
    row: int        # Row (0-2)
    column: int     # Column (0-2)

    def in_bounds(self) -> bool:
        """Check that both coordinates are on the board."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE


def new_board() -> np.ndarray:
    """Create an all-empty board."""
    return np.full((BOARD_SIZE, BOARD_SIZE), Cell.EMPTY, dtype=np.int8)
