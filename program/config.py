"""
Program configuration for TicTacToe.
Account layout sizes and how moves are authorized.
"""

import hashlib


class ProgramConfig:
    """
    Configuration class for the program layer.
    Subclass and override to change behaviour in tests or deployments.
    """

    # ==================== IDENTITIES ====================
    # Players are identified by 32-byte public keys
    IDENTITY_LENGTH = 32

    # ==================== ACCOUNT LAYOUT ====================
    BOARD_SIZE = 3

    # Every stored account starts with this tag
    DISCRIMINATOR = hashlib.sha256(b"account:Game").digest()[:8]
    DISCRIMINATOR_LENGTH = len(DISCRIMINATOR)

    # players + turn + 9 optional signs + largest state variant
    GAME_MAXIMUM_SIZE = (
        IDENTITY_LENGTH * 2
        + 1
        + BOARD_SIZE * BOARD_SIZE * (1 + 1)
        + (IDENTITY_LENGTH + 1)
    )  # 116 bytes

    ACCOUNT_SIZE = DISCRIMINATOR_LENGTH + GAME_MAXIMUM_SIZE

    # ==================== AUTHORIZATION ====================
    # Reject moves from anyone other than the player whose turn it is
    ENFORCE_PLAYER_TURN = True

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
