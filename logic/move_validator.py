"""
Move validator for TicTacToe.
Validates that moves follow the rules before the board is touched.
"""

from typing import List, Optional, TYPE_CHECKING
from dataclasses import dataclass

from .board import BOARD_SIZE, Cell, Tile
from .errors import (
    GameError,
    GameAlreadyOver,
    GameNotStarted,
    TileAlreadySet,
    TileOutOfBounds,
)

if TYPE_CHECKING:
    from .game_state import Game


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[GameError] = None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    def raise_for_error(self):
        """Raise the validation error, if there is one."""
        if self.error is not None:
            raise self.error


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Row and column must be on the board
    3. Game must have been started
    4. Can only place on empty cells

    The validator never looks at who is submitting the move.
    """

    def validate_move(self, game: "Game", tile: Tile) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: Current game.
            tile: Cell to place the current player's sign on.

        Returns:
            ValidationResult with is_valid and the error that would be raised.
        """
        if not game.is_active():
            return ValidationResult(is_valid=False, error=GameAlreadyOver())

        if not tile.in_bounds():
            return ValidationResult(
                is_valid=False,
                error=TileOutOfBounds(
                    f"Tile ({tile.row}, {tile.column}) is out of bounds, must be 0-2"
                ),
            )

        if not game.is_started():
            return ValidationResult(is_valid=False, error=GameNotStarted())

        occupant = game.cell(tile.row, tile.column)
        if occupant is not Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error=TileAlreadySet(
                    f"Tile ({tile.row}, {tile.column}) is already set to {occupant.name}"
                ),
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game: "Game") -> List[Tile]:
        """
        Get every tile the current player may play.

        Returns:
            List of tiles, empty once the game is over or before it starts.
        """
        if not game.is_active() or not game.is_started():
            return []

        return [
            Tile(row, column)
            for row in range(BOARD_SIZE)
            for column in range(BOARD_SIZE)
            if game.cell(row, column) is Cell.EMPTY
        ]
