"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell, Position


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board(BoardConfig(9, 9, 10), rng=random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 9x9 board with no mines for cascade testing."""
    return Board(BoardConfig(9, 9, 0))


@pytest.fixture
def corner_board() -> Board:
    """
    Create a 5x5 board with a single mine in the top-right corner.

        . . . . X
        . . . . .
        . . . . .
        . . . . .
        . . . . .
    """
    return Board.with_mines(BoardConfig(5, 5, 1), [Position(0, 4)])


@pytest.fixture
def small_board() -> Board:
    """
    Create a 3x3 board with mines in both top corners.

        X . X
        . . .
        . . .
    """
    return Board.with_mines(
        BoardConfig(3, 3, 2), [Position(0, 0), Position(0, 2)]
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
