"""
Board module for Minesweeper game.

Implements the game engine: mine placement, flag and reveal moves,
flood-fill of empty regions, and win/lose detection.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple, Union

import numpy as np

from .cell import Cell, CellState
from .errors import (
    GameOverError,
    InvalidConfigError,
    MalformedInputError,
    OutOfBoundsError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = "playing"
    WON_MINES = "won_mines"
    WON_CLEARED = "won_cleared"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        """Check if no further moves are accepted."""
        return self != GameState.PLAYING


class Action(Enum):
    """Move commands, valued by their console keyword."""

    FLAG = "mine"
    FREE = "free"

    @classmethod
    def parse(cls, value: Union["Action", str]) -> "Action":
        """Coerce a keyword into an Action."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise MalformedInputError(
                f"Unknown action {value!r} (expected 'mine' or 'free')"
            ) from None


@dataclass(frozen=True)
class Position:
    """
    A cell position on the board, 0-based.

    Attributes:
        row: Row index, top to bottom.
        col: Column index, left to right.
    """

    row: int
    col: int

    @classmethod
    def from_xy(cls, x: int, y: int) -> "Position":
        """Build from 1-based console coordinates (x = column, y = row)."""
        return cls(row=y - 1, col=x - 1)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigError("Board dimensions must be positive")
        if self.mines < 0:
            raise InvalidConfigError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise InvalidConfigError(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        """Total number of cells on the board."""
        return self.rows * self.cols


# Classic console game
CLASSIC = BoardConfig(9, 9, 10)


@dataclass(frozen=True, eq=False)
class BoardSnapshot:
    """
    Read-only copy of the board handed to renderers.

    Attributes:
        observation: int8 array, -1 hidden, -2 flagged, 0-8 revealed
            count, 9 revealed mine.
        mines: Boolean array marking every mine.
        game_state: State of the game when the snapshot was taken.
        mines_remaining: Mines minus flags placed.
        safe_cells_remaining: Safe cells still to be revealed.
    """

    observation: np.ndarray
    mines: np.ndarray
    game_state: GameState
    mines_remaining: int
    safe_cells_remaining: int

    @property
    def rows(self) -> int:
        return self.observation.shape[0]

    @property
    def cols(self) -> int:
        return self.observation.shape[1]


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, the flag set and the game counters. All
    mutation goes through apply_move.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _flags: Set[Position] = field(default_factory=set, repr=False)
    _game_state: GameState = GameState.PLAYING
    _first_move_taken: bool = False
    _safe_cells_remaining: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid and place mines after dataclass creation."""
        if self.rng is None:
            self.rng = random.Random()
        self._init_grid()
        self._place_mines()
        self._safe_cells_remaining = self.config.cell_count - self.config.mines

    @classmethod
    def with_mines(
        cls,
        config: BoardConfig,
        mines: Iterable[Position],
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with a fixed mine layout.

        Args:
            config: Board configuration; mines must match its mine count.
            mines: Positions of the mines.
            rng: Random source for first-move mine relocation.

        Returns:
            A fresh board with mines at exactly the given positions.
        """
        positions = set(mines)
        if len(positions) != config.mines:
            raise InvalidConfigError(
                f"Expected {config.mines} distinct mines, got {len(positions)}"
            )
        board = cls(config, rng=rng)
        for position in positions:
            if not board._is_valid_position(position):
                raise InvalidConfigError(f"Mine {position} is off the board")
        board._set_mines(positions)
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _all_positions(self) -> List[Position]:
        """Get every position on the board in row-major order."""
        return [
            Position(row, col)
            for row in range(self.config.rows)
            for col in range(self.config.cols)
        ]

    def _place_mines(self) -> None:
        """Place mines at distinct, uniformly random positions."""
        positions = self.rng.sample(self._all_positions(), self.config.mines)
        self._set_mines(positions)
        logger.debug(
            "Placed %d mines on %dx%d board",
            self.config.mines, self.config.rows, self.config.cols,
        )

    def _set_mines(self, positions: Iterable[Position]) -> None:
        """Replace the mine layout with the given positions."""
        for row in self._grid:
            for cell in row:
                cell.is_mine = False
        for position in positions:
            self._cell(position).is_mine = True

    def _relocate_mine(self, position: Position) -> None:
        """Move the mine at position to a random mine-free cell."""
        free = [
            other for other in self._all_positions()
            if other != position and not self._cell(other).is_mine
        ]
        target = self.rng.choice(free)
        self._cell(position).is_mine = False
        self._cell(target).is_mine = True
        logger.debug("First move hit a mine; moved it from %s to %s",
                     position, target)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _cell(self, position: Position) -> Cell:
        return self._grid[position.row][position.col]

    def _get_neighbors(self, position: Position) -> List[Position]:
        """
        Get valid neighboring positions (8-connectivity).

        Args:
            position: Center cell.

        Returns:
            Positions of the up to eight neighbors inside the board.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                neighbor = Position(
                    position.row + delta_row, position.col + delta_col
                )
                if self._is_valid_position(neighbor):
                    neighbors.append(neighbor)
        return neighbors

    def _is_valid_position(self, position: Position) -> bool:
        """Check if position is within board bounds."""
        return (
            0 <= position.row < self.config.rows
            and 0 <= position.col < self.config.cols
        )

    def count_mines_around(self, position: Position) -> int:
        """Count mines in the 3x3 neighborhood of a position."""
        count = 0
        for neighbor in self._get_neighbors(position):
            if self._cell(neighbor).is_mine:
                count += 1
        return count

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def apply_move(
        self, x: int, y: int, action: Union[Action, str]
    ) -> GameState:
        """
        Apply one move to the board.

        Args:
            x: 1-based column.
            y: 1-based row.
            action: Action.FLAG ("mine") toggles a flag, Action.FREE
                ("free") reveals the cell.

        Returns:
            Game state after the move.

        Raises:
            GameOverError: The game already ended.
            MalformedInputError: Coordinates are not integers or the
                action is unknown.
            OutOfBoundsError: Coordinates are outside the board.
        """
        if self._game_state.is_terminal:
            raise GameOverError(
                f"Game is over ({self._game_state.value}); no more moves"
            )
        position, action = self._validate_move(x, y, action)
        logger.debug("Move %s at %s", action.value, position)

        cell = self._cell(position)
        if action is Action.FREE:
            self._free(position)
            if self._game_state == GameState.LOST:
                logger.info("Stepped on a mine at %s", position)
                return self._game_state
        elif cell.is_flagged:
            cell.toggle_flag()
            self._flags.discard(position)
        elif cell.is_hidden:
            cell.toggle_flag()
            self._flags.add(position)
        else:
            logger.debug("Ignoring flag on revealed cell %s", position)

        self._check_win_condition()
        return self._game_state

    def _validate_move(
        self, x: int, y: int, action: Union[Action, str]
    ) -> Tuple[Position, Action]:
        """Check move data before touching the board."""
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise MalformedInputError(
                    f"Coordinates must be integers, got {value!r}"
                )
        action = Action.parse(action)
        position = Position.from_xy(int(x), int(y))
        if not self._is_valid_position(position):
            raise OutOfBoundsError(
                f"Cell ({x}, {y}) is outside the "
                f"{self.config.cols}x{self.config.rows} board"
            )
        return position, action

    def _free(self, position: Position) -> None:
        """Handle a reveal move."""
        cell = self._cell(position)
        if not self._first_move_taken:
            self._first_move_taken = True
            if cell.is_mine:
                self._relocate_mine(position)

        if cell.is_mine:
            cell.reveal()
            self._flags.discard(position)
            self._game_state = GameState.LOST
            return
        self._explore(position)

    def _explore(self, start: Position) -> None:
        """
        Reveal a safe cell and flood out through zero-count neighbors.

        Only neighbors that are exactly hidden are queued, so flagged
        cells are never opened by the fill and each cell is revealed once.
        """
        stack = [start]
        while stack:
            position = stack.pop()
            cell = self._cell(position)
            if cell.is_mine or cell.is_revealed:
                continue

            count = self.count_mines_around(position)
            cell.reveal(count)
            self._flags.discard(position)
            self._safe_cells_remaining -= 1

            if count == 0:
                for neighbor in self._get_neighbors(position):
                    if self._cell(neighbor).state == CellState.HIDDEN:
                        stack.append(neighbor)

    def _check_win_condition(self) -> None:
        """Update game state from the flag set and safe-cell counter."""
        if (
            self.config.mines > 0
            and self.mines_remaining == 0
            and len(self._flags) == self.config.mines
            and all(self._cell(p).is_mine for p in self._flags)
        ):
            self._game_state = GameState.WON_MINES
        elif self._safe_cells_remaining == 0:
            self._game_state = GameState.WON_CLEARED
        if self._game_state.is_terminal:
            logger.info("Game won (%s)", self._game_state.value)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won either way."""
        return self._game_state in (GameState.WON_MINES, GameState.WON_CLEARED)

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def mines_remaining(self) -> int:
        """Mines not yet accounted for by a flag."""
        return self.config.mines - len(self._flags)

    @property
    def safe_cells_remaining(self) -> int:
        """Safe cells not yet revealed."""
        return self._safe_cells_remaining

    @property
    def first_move_taken(self) -> bool:
        return self._first_move_taken

    @property
    def flagged_positions(self) -> FrozenSet[Position]:
        return frozenset(self._flags)

    @property
    def mine_positions(self) -> FrozenSet[Position]:
        return frozenset(
            p for p in self._all_positions() if self._cell(p).is_mine
        )

    def get_cell(self, position: Position) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(position):
            return None
        return self._cell(position)

    def get_observation(self) -> np.ndarray:
        """
        Get visible board state as numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation()
        return obs

    def get_mine_mask(self) -> np.ndarray:
        """Get boolean array marking every mine."""
        mask = np.zeros((self.config.rows, self.config.cols), dtype=bool)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                mask[row, col] = self._grid[row][col].is_mine
        return mask

    def snapshot(self) -> BoardSnapshot:
        """Take a read-only copy of the board for rendering."""
        return BoardSnapshot(
            observation=self.get_observation(),
            mines=self.get_mine_mask(),
            game_state=self._game_state,
            mines_remaining=self.mines_remaining,
            safe_cells_remaining=self._safe_cells_remaining,
        )
