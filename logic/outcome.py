"""
Game outcome for TicTacToe.

The state is one of three variants. Only Won carries data, the
winner's identity, so there is never a winner without a result.
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Active:
    """Moves are still being accepted."""


@dataclass(frozen=True)
class Tie:
    """The board filled up without a winning line."""


@dataclass(frozen=True)
class Won:
    """A player completed a line."""
    winner: Any


GameState = Union[Active, Tie, Won]


def is_terminal(state: GameState) -> bool:
    """True once the game can no longer change."""
    return not isinstance(state, Active)
