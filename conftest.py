"""
Pytest configuration and shared fixtures.
"""

import pytest

from logic import Game, Tile
from program import InMemoryGameRepository, TicTacToeProgram


# Fixed 32-byte identities so failures are easy to read
PLAYER_A = bytes([0xAA]) * 32
PLAYER_B = bytes([0xBB]) * 32


@pytest.fixture
def players():
    return PLAYER_A, PLAYER_B


@pytest.fixture
def game(players) -> Game:
    """A started game with no moves yet."""
    game = Game()
    game.start(players)
    return game


@pytest.fixture
def play_moves():
    """Play a list of (row, col) moves in order on a game."""
    def _play(game: Game, moves):
        for row, col in moves:
            game.play(Tile(row, col))
        return game
    return _play


@pytest.fixture
def repository() -> InMemoryGameRepository:
    return InMemoryGameRepository()


@pytest.fixture
def program(repository) -> TicTacToeProgram:
    return TicTacToeProgram(repository)
