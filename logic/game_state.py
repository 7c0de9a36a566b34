"""
Game state management for TicTacToe.
Tracks the board, the turn counter, the two players and the result.
"""

from typing import Any, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .board import BOARD_SIZE, Cell, Tile, new_board
from .errors import GameAlreadyStarted
from .move_validator import MoveValidator
from .outcome import Active, GameState
from .win_checker import WinChecker


_validator = MoveValidator()
_win_checker = WinChecker()


@dataclass(eq=False)
class Game:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The two players (opaque identities, index 0 moves first)
    - The turn counter (0 until started, then 1, 2, ...)
    - The 3x3 board of Cell values
    - The result (Active, Tie or Won)

    Whose move it is comes from the turn counter, it is never stored.
    """

    players: Tuple[Any, Any] = (None, None)

    # 0 means the game has not been started
    turn: int = 0

    board: np.ndarray = field(default_factory=new_board)

    state: GameState = field(default_factory=Active)

    def is_active(self) -> bool:
        """True while moves are still accepted."""
        return isinstance(self.state, Active)

    def is_started(self) -> bool:
        return self.turn != 0

    def current_player_index(self) -> int:
        """Index into players of whoever moves on this turn."""
        return (self.turn - 1) % 2

    def current_player(self) -> Any:
        return self.players[self.current_player_index()]

    def cell(self, row: int, column: int) -> Cell:
        return Cell(int(self.board[row, column]))

    def start(self, players: Tuple[Any, Any]):
        """
        Seat the two players and begin turn 1.

        Args:
            players: (first player, second player). Not checked for distinctness.

        Raises:
            GameAlreadyStarted: if start was already called.
        """
        if self.turn != 0:
            raise GameAlreadyStarted()

        first, second = players
        self.players = (first, second)
        self.turn = 1

    def play(self, tile: Tile):
        """
        Place the current player's sign on a tile.

        The move is fully validated before anything changes, so a rejected
        move leaves the game exactly as it was.

        Args:
            tile: Where to play.

        Raises:
            GameAlreadyOver, TileOutOfBounds, GameNotStarted, TileAlreadySet
        """
        _validator.validate_move(self, tile).raise_for_error()

        self.board[tile.row, tile.column] = Cell.from_player_index(
            self.current_player_index()
        )

        self.state = _win_checker.evaluate(self)
        if self.is_active():
            self.turn += 1

    def empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples.
        """
        rows, cols = np.nonzero(self.board == Cell.EMPTY)
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def copy(self) -> "Game":
        """Create a deep copy of the game."""
        return Game(
            players=self.players,
            turn=self.turn,
            board=self.board.copy(),
            state=self.state,
        )

    def render(self) -> str:
        """Draw the board as text."""
        lines = ["    0   1   2"]
        for row in range(BOARD_SIZE):
            cells = " | ".join(self.cell(row, col).symbol for col in range(BOARD_SIZE))
            lines.append(f"{row}   {cells}")
            if row < BOARD_SIZE - 1:
                lines.append("   ---+---+---")
        return "\n".join(lines)
