"""
Game account storage.

The rules engine never touches storage. The program loads a game from a
repository, hands it to the engine, and saves it back afterwards.
"""

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator, Type

from logic import Game
from .codec import decode_game, encode_game
from .config import ProgramConfig
from .errors import AccountAlreadyExists, AccountNotFound

logger = logging.getLogger(__name__)


class GameRepository(ABC):
    """Where game accounts live between calls."""

    @abstractmethod
    def create(self, game_id: Hashable, game: Game) -> None:
        """Store a new game. Raises AccountAlreadyExists if the id is taken."""

    @abstractmethod
    def load(self, game_id: Hashable) -> Game:
        """Read a game. Raises AccountNotFound if there is none."""

    @abstractmethod
    def save(self, game_id: Hashable, game: Game) -> None:
        """Overwrite an existing game. Raises AccountNotFound if there is none."""

    @abstractmethod
    def exists(self, game_id: Hashable) -> bool:
        ...

    @abstractmethod
    def lock(self, game_id: Hashable):
        """
        Context manager giving exclusive access to one game.
        Raises AccountNotFound if there is none.
        """

    def release_lock(self, game_id: Hashable) -> None:
        """Forget the lock of a game that will never change again."""


class InMemoryGameRepository(GameRepository):
    """
    Keeps encoded accounts in a dict.

    Games are stored as bytes, not objects, so every load hands out a
    fresh Game and a rejected move can never leak into storage.
    """

    def __init__(self, config: Type[ProgramConfig] = ProgramConfig):
        self.config = config
        self._accounts: Dict[Hashable, bytes] = {}
        self._accounts_lock = threading.Lock()
        self._game_locks: Dict[Hashable, threading.Lock] = {}

    def create(self, game_id: Hashable, game: Game) -> None:
        data = encode_game(game, self.config)
        with self._accounts_lock:
            if game_id in self._accounts:
                raise AccountAlreadyExists(game_id)
            self._accounts[game_id] = data
        logger.debug("Created account %r (%d bytes)", game_id, len(data))

    def load(self, game_id: Hashable) -> Game:
        with self._accounts_lock:
            data = self._accounts.get(game_id)
        if data is None:
            raise AccountNotFound(game_id)
        return decode_game(data, self.config)

    def save(self, game_id: Hashable, game: Game) -> None:
        data = encode_game(game, self.config)
        with self._accounts_lock:
            if game_id not in self._accounts:
                raise AccountNotFound(game_id)
            self._accounts[game_id] = data

    def exists(self, game_id: Hashable) -> bool:
        with self._accounts_lock:
            return game_id in self._accounts

    @contextmanager
    def lock(self, game_id: Hashable) -> Iterator[None]:
        with self._accounts_lock:
            # Only stored games get a lock, unknown ids must not grow the map
            if game_id not in self._accounts:
                raise AccountNotFound(game_id)
            game_lock = self._game_locks.setdefault(game_id, threading.Lock())
        with game_lock:
            yield

    def release_lock(self, game_id: Hashable) -> None:
        with self._accounts_lock:
            self._game_locks.pop(game_id, None)

    def raw(self, game_id: Hashable) -> bytes:
        """The stored account bytes, for inspection."""
        with self._accounts_lock:
            if game_id not in self._accounts:
                raise AccountNotFound(game_id)
            return self._accounts[game_id]
