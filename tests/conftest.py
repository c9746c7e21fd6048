"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src (for the package) and the repo root (for main.py) to path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minefield import Board, BoardConfig, Grid


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def corner_grid() -> Grid:
    """3x3 grid with a single bomb in the top-left corner."""
    return Grid.from_bombs(3, [(0, 0)])


@pytest.fixture
def wall_grid() -> Grid:
    """5x5 grid with a wall of bombs down the middle column."""
    return Grid.from_bombs(5, [(row, 2) for row in range(5)])


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 bombs."""
    return Board(rng=0)


@pytest.fixture
def corner_board(corner_grid: Grid) -> Board:
    """3x3 board with one bomb at (0, 0)."""
    return Board.from_grid(corner_grid)


@pytest.fixture
def wall_board(wall_grid: Grid) -> Board:
    """5x5 board split in two by a column of bombs."""
    return Board.from_grid(wall_grid)


@pytest.fixture
def tiny_board() -> Board:
    """2x2 board with one bomb at (0, 0) and three hint cells."""
    return Board.from_grid(Grid.from_bombs(2, [(0, 0)]))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no bombs for cascade testing."""
    return Board(BoardConfig(5, 0), rng=0)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small configuration for quick environment episodes."""
    return BoardConfig(4, 2)
