"""
Program instructions for TicTacToe.

This is the layer that sits between clients and the rules engine:
- loads and saves game accounts through a repository
- checks that the player submitting a move is the one whose turn it is
- reports rule violations back as typed errors
"""

import logging
from typing import Hashable, Optional, Type

from logic import Game, NotPlayersTurn, Tie, Tile, Won, is_terminal
from .codec import validate_identity
from .config import ProgramConfig
from .repository import GameRepository, InMemoryGameRepository

logger = logging.getLogger(__name__)


class TicTacToeProgram:
    """
    Runs setup and play requests against stored games.

    Each request works on its own freshly loaded Game under that game's
    lock, so concurrent requests for the same game are applied one at a
    time. A game is only saved when the request succeeded.
    """

    def __init__(
        self,
        repository: Optional[GameRepository] = None,
        config: Type[ProgramConfig] = ProgramConfig,
    ):
        """
        Initialize the program.

        Args:
            repository: Account storage. Uses an in-memory store if not provided.
            config: Program configuration.
        """
        self.config = config
        self.repository = repository or InMemoryGameRepository(config)

    def setup_game(self, game_id: Hashable, player_one, player_two) -> Game:
        """
        Create a game account and start it.

        Args:
            game_id: Key for the new account.
            player_one: Identity of the player who moves first (signs X).
            player_two: Identity of the second player (signs O).

        Returns:
            The started game.

        Raises:
            InvalidIdentity: if either player cannot be stored.
            AccountAlreadyExists: if game_id is already in use.
        """
        players = (
            validate_identity(player_one, self.config),
            validate_identity(player_two, self.config),
        )

        game = Game()
        game.start(players)
        self.repository.create(game_id, game)

        logger.info("Game %r set up, turn %d", game_id, game.turn)
        return game

    def play(self, game_id: Hashable, player, tile: Tile) -> Game:
        """
        Play a move on behalf of a player.

        Args:
            game_id: Which game.
            player: Identity submitting the move, already authenticated.
            tile: Where to play.

        Returns:
            The game after the move.

        Raises:
            AccountNotFound: if there is no such game.
            NotPlayersTurn: if enforcement is on and player is not the mover.
            GameError: any rule violation from the engine.
        """
        with self.repository.lock(game_id):
            game = self.repository.load(game_id)

            if self.config.ENFORCE_PLAYER_TURN and game.is_active() and game.is_started():
                if player != game.current_player():
                    raise NotPlayersTurn()

            game.play(tile)
            self.repository.save(game_id, game)

        if is_terminal(game.state):
            self.repository.release_lock(game_id)

        logger.debug(
            "Game %r: (%d, %d) played, turn now %d",
            game_id, tile.row, tile.column, game.turn,
        )
        if isinstance(game.state, Won):
            logger.info("Game %r won on turn %d", game_id, game.turn)
        elif isinstance(game.state, Tie):
            logger.info("Game %r ended in a tie", game_id)

        return game

    def get_game(self, game_id: Hashable) -> Game:
        """Load a copy of a stored game."""
        return self.repository.load(game_id)
