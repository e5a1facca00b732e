"""
Exceptions raised by the game core.

- InvalidGuessError: bad guess text; nothing was changed, just ask again.
- GameStateError: the call does not fit the current state of the game.
- SnapshotError: a saved game could not be turned back into a Game.

File system problems are not wrapped; OSError reaches the caller as is.
"""


class SecretCodeError(Exception):
    """Base class for everything the core raises on purpose."""


class InvalidGuessError(SecretCodeError, ValueError):
    pass


class GameStateError(SecretCodeError, RuntimeError):
    pass


class GameOverError(GameStateError):
    pass


class SecretHiddenError(GameStateError):
    pass


class SnapshotError(SecretCodeError, ValueError):
    pass


class SnapshotFormatError(SnapshotError):
    """The file is not JSON, or the JSON does not have the snapshot shape."""


class SnapshotDataError(SnapshotError):
    """The snapshot parsed fine but describes a game that cannot exist."""
