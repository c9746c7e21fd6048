"""
Grid generation for Minesweeper.

Builds the bomb layout for a square board and derives the hint value of
every cell. A generated grid is read-only and shared with the board.
"""
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

import numpy as np

from .cell import BOMB


# ============================================================================
# Constants
# ============================================================================

PLACEMENT_METHODS = ("retry", "shuffle")

RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Turn a seed (or nothing) into a numpy Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


# ============================================================================
# Neighbor Utilities
# ============================================================================

def neighbors(row: int, col: int, size: int) -> Iterator[Tuple[int, int]]:
    """
    Yield in-bounds Moore neighbors of a cell in row-major order.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        size: Board side length.
    """
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if 0 <= new_row < size and 0 <= new_col < size:
                yield new_row, new_col


def validate_dimensions(size: int, num_bombs: int) -> None:
    """Ensure size and bomb count describe a buildable grid."""
    if not isinstance(size, (int, np.integer)) or isinstance(size, bool):
        raise ValueError(f"Board size must be an integer, got {size!r}")
    if not isinstance(num_bombs, (int, np.integer)) or isinstance(num_bombs, bool):
        raise ValueError(f"Number of bombs must be an integer, got {num_bombs!r}")
    if size < 1:
        raise ValueError("Board size must be positive")
    if num_bombs < 0:
        raise ValueError("Number of bombs cannot be negative")
    if num_bombs > size * size:
        raise ValueError(f"Too many bombs (max {size * size})")


# ============================================================================
# Grid
# ============================================================================

@dataclass(frozen=True, eq=False)
class Grid:
    """
    Immutable Minesweeper grid.

    Attributes:
        size: Side length N of the square grid.
        values: N x N int8 array; -1 marks a bomb, 0-8 count bomb neighbors.
        bomb_locations: (row, col) of every bomb in linear-index order.
    """

    size: int
    values: np.ndarray
    bomb_locations: Tuple[Tuple[int, int], ...]

    @classmethod
    def from_bombs(
        cls, size: int, bombs: Iterable[Tuple[int, int]]
    ) -> "Grid":
        """
        Build a grid from an explicit bomb layout.

        Args:
            size: Side length of the grid.
            bombs: (row, col) positions to hold bombs.

        Returns:
            Grid with hint values computed for the layout.
        """
        bombs = list(bombs)
        validate_dimensions(size, len(bombs))

        values = np.zeros((size, size), dtype=np.int8)
        for row, col in bombs:
            if not (0 <= row < size and 0 <= col < size):
                raise ValueError(f"Bomb position out of bounds: ({row}, {col})")
            if values[row, col] == BOMB:
                raise ValueError(f"Duplicate bomb position: ({row}, {col})")
            values[row, col] = BOMB

        return cls._build(size, values)

    @classmethod
    def _build(cls, size: int, values: np.ndarray) -> "Grid":
        """Fill in hint values and freeze the array."""
        _calculate_hints(values)
        locations = tuple(
            (int(row), int(col)) for row, col in np.argwhere(values == BOMB)
        )
        values.setflags(write=False)
        return cls(size=size, values=values, bomb_locations=locations)

    @property
    def num_bombs(self) -> int:
        """Number of bombs on the grid."""
        return len(self.bomb_locations)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def value(self, row: int, col: int) -> int:
        """Get the value stored at a position."""
        return int(self.values[row, col])

    def is_bomb(self, row: int, col: int) -> bool:
        """Check if a position holds a bomb."""
        return bool(self.values[row, col] == BOMB)


# ============================================================================
# Generation
# ============================================================================

def generate(
    size: int,
    num_bombs: int,
    rng: RandomSource = None,
    method: str = "retry",
) -> Grid:
    """
    Generate a random grid.

    Bombs are drawn as distinct linear indices in [0, size**2) and mapped
    to (index // size, index % size).

    Args:
        size: Side length N (at least 1).
        num_bombs: Bombs to place, between 0 and N**2 inclusive.
        rng: numpy Generator or integer seed.
        method: "retry" draws indices one at a time and redraws on a
            collision; "shuffle" takes the head of a permutation.

    Returns:
        Newly generated grid.
    """
    validate_dimensions(size, num_bombs)
    if method not in PLACEMENT_METHODS:
        raise ValueError(f"Unknown placement method: {method}")

    rng = make_rng(rng)
    total = size * size

    if method == "shuffle":
        indices = rng.permutation(total)[:num_bombs].tolist()
    else:
        indices = _draw_with_retry(rng, total, num_bombs)

    values = np.zeros((size, size), dtype=np.int8)
    for index in indices:
        row, col = divmod(int(index), size)
        values[row, col] = BOMB

    return Grid._build(size, values)


def _draw_with_retry(
    rng: np.random.Generator, total: int, count: int
) -> List[int]:
    """Draw distinct indices, redrawing whenever one repeats."""
    chosen: List[int] = []
    taken = np.zeros(total, dtype=bool)
    while len(chosen) < count:
        index = int(rng.integers(0, total))
        if taken[index]:
            continue
        taken[index] = True
        chosen.append(index)
    return chosen


def _calculate_hints(values: np.ndarray) -> None:
    """Store the bomb-neighbor count in every non-bomb cell."""
    size = values.shape[0]
    for row in range(size):
        for col in range(size):
            if values[row, col] == BOMB:
                continue
            values[row, col] = _count_adjacent_bombs(values, row, col)


def _count_adjacent_bombs(values: np.ndarray, row: int, col: int) -> int:
    """Count bombs adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in neighbors(row, col, values.shape[0]):
        if values[neighbor_row, neighbor_col] == BOMB:
            count += 1
    return count

