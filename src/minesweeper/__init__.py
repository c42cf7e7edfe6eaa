"""
Console Minesweeper.

Provides the game engine, text rendering and the console play loop.
"""
from .cell import Cell, CellState
from .board import (
    Action,
    Board,
    BoardConfig,
    BoardSnapshot,
    GameState,
    Position,
    CLASSIC,
)
from .errors import (
    MinesweeperError,
    InvalidConfigError,
    OutOfBoundsError,
    MalformedInputError,
    GameOverError,
)
from .render import render
from .console import ConsoleInput, Move, parse_move, play

__all__ = [
    "Cell",
    "CellState",
    "Action",
    "Board",
    "BoardConfig",
    "BoardSnapshot",
    "GameState",
    "Position",
    "CLASSIC",
    "MinesweeperError",
    "InvalidConfigError",
    "OutOfBoundsError",
    "MalformedInputError",
    "GameOverError",
    "render",
    "ConsoleInput",
    "Move",
    "parse_move",
    "play",
]
