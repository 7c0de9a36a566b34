"""
Storage errors for the program layer.
These are about accounts, not about the rules of the game.
"""


class AccountError(Exception):
    """Base class for account storage problems."""


class AccountNotFound(AccountError):
    def __init__(self, game_id):
        super().__init__(f"No game account for {game_id!r}")
        self.game_id = game_id


class AccountAlreadyExists(AccountError):
    def __init__(self, game_id):
        super().__init__(f"Game account {game_id!r} already exists")
        self.game_id = game_id


class AccountDecodeError(AccountError):
    """Stored bytes are not a valid game account."""


class InvalidIdentity(AccountError):
    """A player identity that does not fit the account layout."""

    def __init__(self, identity, expected_length: int):
        super().__init__(
            f"Identity must be {expected_length} bytes, got {identity!r}"
        )
        self.identity = identity
