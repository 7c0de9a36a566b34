"""
Fixed-size account encoding for TicTacToe games.

Layout (little-endian):
    discriminator   8 bytes
    players         2 x 32 bytes (zeros while turn is 0)
    turn            u8
    board           9 x option: 0, or 1 followed by sign (0 = X, 1 = O)
    state           u8 tag (0 Active, 1 Tie, 2 Won) + 32-byte winner for Won
    padding         zeros up to ACCOUNT_SIZE
"""

import struct
from typing import Type

import numpy as np

from logic import Active, Cell, Game, Tie, Won
from .config import ProgramConfig
from .errors import AccountDecodeError, InvalidIdentity


_STATE_ACTIVE = 0
_STATE_TIE = 1
_STATE_WON = 2

_OPTION_NONE = 0
_OPTION_SOME = 1

# Cell value -> stored sign byte, and back
_SIGN_BYTES = {Cell.X: 0, Cell.O: 1}
_SIGNS = {value: cell for cell, value in _SIGN_BYTES.items()}


def validate_identity(identity, config: Type[ProgramConfig] = ProgramConfig) -> bytes:
    """
    Check that an identity can be stored in an account.

    Returns:
        The identity as bytes.

    Raises:
        InvalidIdentity: if it is not IDENTITY_LENGTH bytes.
    """
    if not isinstance(identity, (bytes, bytearray)) or len(identity) != config.IDENTITY_LENGTH:
        raise InvalidIdentity(identity, config.IDENTITY_LENGTH)
    return bytes(identity)


def _encode_identity(identity, config: Type[ProgramConfig]) -> bytes:
    # Players are unset only before the game starts
    if identity is None:
        return bytes(config.IDENTITY_LENGTH)
    return validate_identity(identity, config)


def encode_game(game: Game, config: Type[ProgramConfig] = ProgramConfig) -> bytes:
    """
    Serialize a game into its account bytes.

    Args:
        game: The game to store.
        config: Layout settings.

    Returns:
        Exactly config.ACCOUNT_SIZE bytes.

    Raises:
        InvalidIdentity: if a player identity is not IDENTITY_LENGTH bytes.
    """
    out = bytearray(config.DISCRIMINATOR)

    for player in game.players:
        out += _encode_identity(player, config)

    out += struct.pack("<B", game.turn)

    for value in game.board.flatten():
        cell = Cell(int(value))
        if cell is Cell.EMPTY:
            out += struct.pack("<B", _OPTION_NONE)
        else:
            out += struct.pack("<BB", _OPTION_SOME, _SIGN_BYTES[cell])

    if isinstance(game.state, Won):
        out += struct.pack("<B", _STATE_WON)
        out += _encode_identity(game.state.winner, config)
    elif isinstance(game.state, Tie):
        out += struct.pack("<B", _STATE_TIE)
    else:
        out += struct.pack("<B", _STATE_ACTIVE)

    out += bytes(config.ACCOUNT_SIZE - len(out))
    return bytes(out)


def decode_game(data: bytes, config: Type[ProgramConfig] = ProgramConfig) -> Game:
    """
    Rebuild a game from its account bytes.

    Raises:
        AccountDecodeError: if the bytes are not a game account.
    """
    if len(data) != config.ACCOUNT_SIZE:
        raise AccountDecodeError(
            f"Expected {config.ACCOUNT_SIZE} bytes, got {len(data)}"
        )
    if data[:config.DISCRIMINATOR_LENGTH] != config.DISCRIMINATOR:
        raise AccountDecodeError("Account discriminator does not match")

    offset = config.DISCRIMINATOR_LENGTH
    size = config.IDENTITY_LENGTH

    players = []
    for _ in range(2):
        players.append(bytes(data[offset:offset + size]))
        offset += size

    (turn,) = struct.unpack_from("<B", data, offset)
    offset += 1

    # All-zero bytes are a valid key, so "no players" comes from the turn
    if turn == 0:
        players = [None, None]

    cells = []
    for _ in range(config.BOARD_SIZE * config.BOARD_SIZE):
        (tag,) = struct.unpack_from("<B", data, offset)
        offset += 1
        if tag == _OPTION_NONE:
            cells.append(Cell.EMPTY)
        elif tag == _OPTION_SOME:
            (sign,) = struct.unpack_from("<B", data, offset)
            offset += 1
            if sign not in _SIGNS:
                raise AccountDecodeError(f"Invalid sign byte {sign}")
            cells.append(_SIGNS[sign])
        else:
            raise AccountDecodeError(f"Invalid cell tag {tag}")

    (tag,) = struct.unpack_from("<B", data, offset)
    offset += 1
    if tag == _STATE_ACTIVE:
        state = Active()
    elif tag == _STATE_TIE:
        state = Tie()
    elif tag == _STATE_WON:
        state = Won(winner=bytes(data[offset:offset + size]))
    else:
        raise AccountDecodeError(f"Invalid state tag {tag}")

    board = np.array(cells, dtype=np.int8).reshape(config.BOARD_SIZE, config.BOARD_SIZE)
    return Game(players=tuple(players), turn=turn, board=board, state=state)
