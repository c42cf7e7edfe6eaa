"""
Cell module for Minesweeper game.

Represents individual cells on the minefield with their visible state
(hidden/flagged/revealed) and the hidden mine attribute.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visible states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


HIDDEN_VALUE = -1
FLAGGED_VALUE = -2
MINE_VALUE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Never shown until
            the game is lost.
        adjacent_mines: Count of mines in neighboring cells (0-8), filled
            in when the cell is revealed.
        state: Current visible state (hidden, flagged, or revealed).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self, adjacent_mines: int = 0) -> bool:
        """
        Reveal this cell with its adjacent mine count.

        Flagged cells may be revealed; the flag is dropped.

        Returns:
            True if cell was revealed, False if it already was.
        """
        if self.state == CellState.REVEALED:
            return False
        self.adjacent_mines = adjacent_mines
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to its snapshot value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (the one stepped on)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_VALUE
        if self.state == CellState.FLAGGED:
            return FLAGGED_VALUE
        if self.is_mine:
            return MINE_VALUE
        return self.adjacent_mines
