"""
Errors for the TicTacToe rules engine.

Every rule violation is its own exception class so callers can catch
exactly what they care about. Each one carries a stable numeric code
that the program layer reports to clients.
"""

from typing import Dict, Optional, Type


class GameError(Exception):
    """Base class for all rule violations."""

    code: int = 0
    message: str = "Game error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)

    def __str__(self) -> str:
        return f"{self.args[0]} (code {self.code})"


class TileOutOfBounds(GameError):
    code = 6000
    message = "Tile is out of bounds"


class TileAlreadySet(GameError):
    code = 6001
    message = "Tile is already set"


class GameAlreadyOver(GameError):
    code = 6002
    message = "Game is already over"


class NotPlayersTurn(GameError):
    # Raised by the program layer, the core never checks identities
    code = 6003
    message = "It is not this player's turn"


class GameAlreadyStarted(GameError):
    code = 6004
    message = "Game has already started"


class GameNotStarted(GameError):
    code = 6005
    message = "Game has not started yet"


ERRORS_BY_CODE: Dict[int, Type[GameError]] = {
    cls.code: cls
    for cls in (
        TileOutOfBounds,
        TileAlreadySet,
        GameAlreadyOver,
        NotPlayersTurn,
        GameAlreadyStarted,
        GameNotStarted,
    )
}


def error_from_code(code: int) -> Type[GameError]:
    """
    Look up the error class registered for a numeric code.

    Raises:
        KeyError: if no error uses this code.
    """
    return ERRORS_BY_CODE[code]
