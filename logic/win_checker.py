"""
Win checker for TicTacToe.
Decides whether the last move won the game, tied it, or left it open.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .board import Cell
from .outcome import Active, GameState, Tie, Won

if TYPE_CHECKING:
    from .game_state import Game


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical signs in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, in the order they are scanned
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def evaluate(self, game: "Game") -> GameState:
        """
        Work out the state after the move that was just made.

        The winner is the current player, which is still the player who
        just moved because the turn has not been advanced yet.

        Args:
            game: The game, with the new sign already on the board.

        Returns:
            Won, Tie or Active.
        """
        if self.get_winning_line(game.board) is not None:
            return Won(winner=game.current_player())

        if self.is_board_full(game.board):
            return Tie()

        return Active()

    def get_winning_line(self, board: np.ndarray) -> Optional[List[Tuple[int, int]]]:
        """
        Get the first winning line on the board, if there is one.

        Args:
            board: 3x3 array of Cell values.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line, cells in zip(self.WINNING_LINES, self._lines(board)):
            if self._is_winning(cells):
                return line
        return None

    def is_board_full(self, board: np.ndarray) -> bool:
        """True when no cell is empty."""
        return not np.any(board == Cell.EMPTY)

    def _lines(self, board: np.ndarray) -> List[np.ndarray]:
        # Same order as WINNING_LINES
        lines = list(board)
        lines.extend(board.T)
        lines.append(np.diag(board))
        lines.append(np.diag(np.fliplr(board)))
        return lines

    def _is_winning(self, cells: np.ndarray) -> bool:
        return bool(cells[0] != Cell.EMPTY and np.all(cells == cells[0]))
