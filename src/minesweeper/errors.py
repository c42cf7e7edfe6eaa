"""
Error types raised by the Minesweeper engine and its console front-end.
"""


class MinesweeperError(Exception):
    """Base class for all game errors."""


class InvalidConfigError(MinesweeperError, ValueError):
    """Board dimensions or mine count are out of range."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Move coordinates fall outside the board."""


class MalformedInputError(MinesweeperError, ValueError):
    """A move could not be parsed or carries invalid data."""


class GameOverError(MinesweeperError, RuntimeError):
    """A move was submitted after the game reached a terminal state."""
