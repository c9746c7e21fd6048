"""
Board module for Minesweeper.

Implements the game board on top of a generated grid: reveal handling
with flood fill, the cells-remaining counter, and win/loss detection.
"""
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

import numpy as np

from .cell import (
    BOMB,
    BOMB_OBSERVATION,
    HIDDEN_OBSERVATION,
    CellChange,
    CellState,
)
from .grid import (
    Grid,
    RandomSource,
    generate,
    make_rng,
    neighbors,
    validate_dimensions,
)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows (and columns).
        num_bombs: Total bombs to place.
    """

    size: int = 9
    num_bombs: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        validate_dimensions(self.size, self.num_bombs)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size


# Preset difficulty levels
BEGINNER = BoardConfig(9, 10)
INTERMEDIATE = BoardConfig(16, 40)
EXPERT = BoardConfig(22, 99)


@dataclass
class RevealResult:
    """
    Outcome of a single reveal call.

    Attributes:
        changes: Cells that became visible, in emission order.
        game_state: Board state after the reveal.
    """

    changes: List[CellChange] = field(default_factory=list)
    game_state: GameState = GameState.PLAYING

    @property
    def is_empty(self) -> bool:
        """True when the reveal changed nothing."""
        return not self.changes

    def positions(self) -> List[Tuple[int, int]]:
        """(row, col) of every changed cell."""
        return [(change.row, change.col) for change in self.changes]


# ============================================================================
# Board Class
# ============================================================================

@dataclass(eq=False)
class Board:
    """
    Minesweeper game board.

    Owns the reveal state of every cell and the game state. The grid is
    generated on construction (or supplied) and never modified.

    Attributes:
        config: Board size and bomb count.
        rng: numpy Generator or seed used for bomb placement.
        placement: Bomb placement method ("retry" or "shuffle").
        grid: Fixed grid to play on instead of a random one.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: RandomSource = field(default=None, repr=False)
    placement: str = "retry"
    grid: Optional[Grid] = field(default=None, repr=False)
    _revealed: np.ndarray = field(init=False, repr=False)
    _game_state: GameState = field(init=False, default=GameState.PLAYING)
    _cells_remaining: int = field(init=False, default=0)
    _triggered_bomb: Optional[Tuple[int, int]] = field(
        init=False, default=None, repr=False
    )

    def __post_init__(self) -> None:
        """Generate the grid and hide every cell."""
        self._rng = make_rng(self.rng)
        self._fixed_grid = self.grid is not None
        if self._fixed_grid:
            self._check_grid_matches_config()
        self._init_state()

    @classmethod
    def from_grid(cls, grid: Grid) -> "Board":
        """Create a board that plays on a known grid."""
        return cls(config=BoardConfig(grid.size, grid.num_bombs), grid=grid)

    # ========================================================================
    # Initialization (Low-level)
    # ========================================================================

    def _check_grid_matches_config(self) -> None:
        """Reject a supplied grid that disagrees with the config."""
        if self.grid.size != self.config.size:
            raise ValueError(
                f"Grid size {self.grid.size} does not match "
                f"board size {self.config.size}"
            )
        if self.grid.num_bombs != self.config.num_bombs:
            raise ValueError(
                f"Grid has {self.grid.num_bombs} bombs, "
                f"board expects {self.config.num_bombs}"
            )

    def _init_state(self) -> None:
        """Create a fresh game: new grid (unless fixed), all cells hidden."""
        if not self._fixed_grid:
            self.grid = generate(
                self.config.size,
                self.config.num_bombs,
                self._rng,
                self.placement,
            )
        size = self.config.size
        self._revealed = np.zeros((size, size), dtype=bool)
        self._game_state = GameState.PLAYING
        self._cells_remaining = self.config.total_cells
        self._triggered_bomb = None

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        A bomb ends the game and uncovers every bomb. An empty cell
        flood-fills its connected empty region plus the bordering hint
        cells. A hint cell reveals only itself.

        Out-of-bounds positions, revealed cells and finished games are
        ignored and produce an empty result.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Changed cells and the resulting game state.
        """
        if not self._can_reveal(row, col):
            return RevealResult([], self._game_state)

        value = self.grid.value(row, col)
        if value == BOMB:
            changes = self._reveal_bombs(row, col)
        elif value == 0:
            changes = self._flood_fill(row, col)
        else:
            changes = [self._reveal_cell(row, col)]

        if self._game_state == GameState.PLAYING:
            self._check_win_condition()

        return RevealResult(changes, self._game_state)

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._game_state != GameState.PLAYING:
            return False
        if not self.grid.in_bounds(row, col):
            return False
        return not self._revealed[row, col]

    def _reveal_cell(self, row: int, col: int) -> CellChange:
        """Mark one cell revealed and describe the change."""
        if not self._revealed[row, col]:
            self._revealed[row, col] = True
            self._cells_remaining -= 1
        return CellChange(row, col, self.grid.value(row, col))

    def _reveal_bombs(self, row: int, col: int) -> List[CellChange]:
        """Lose the game: the clicked bomb first, then every other bomb."""
        self._game_state = GameState.LOST
        self._triggered_bomb = (row, col)

        changes = [self._reveal_cell(row, col)]
        for bomb_row, bomb_col in self.grid.bomb_locations:
            if (bomb_row, bomb_col) == (row, col):
                continue
            changes.append(self._reveal_cell(bomb_row, bomb_col))
        return changes

    def _flood_fill(self, row: int, col: int) -> List[CellChange]:
        """
        Breadth-first reveal of the empty region containing a cell.

        Expansion continues only through cells with value 0; their
        neighbors are revealed as the edge of the region. Each cell is
        queued at most once.
        """
        size = self.config.size
        seen = np.zeros(size * size, dtype=bool)
        seen[row * size + col] = True
        queue = deque([(row, col)])
        changes = []

        while queue:
            current_row, current_col = queue.popleft()
            if not self._revealed[current_row, current_col]:
                changes.append(self._reveal_cell(current_row, current_col))

            if self.grid.value(current_row, current_col) != 0:
                continue

            for neighbor_row, neighbor_col in neighbors(
                current_row, current_col, size
            ):
                index = neighbor_row * size + neighbor_col
                if not seen[index]:
                    seen[index] = True
                    queue.append((neighbor_row, neighbor_col))

        return changes

    def _check_win_condition(self) -> None:
        """Win once only bomb cells remain hidden."""
        if self._cells_remaining == self.config.num_bombs:
            self._game_state = GameState.WON

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
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def size(self) -> int:
        """Board side length."""
        return self.config.size

    @property
    def num_bombs(self) -> int:
        """Number of bombs on the board."""
        return self.config.num_bombs

    @property
    def cells_remaining(self) -> int:
        """Number of cells still hidden."""
        return self._cells_remaining

    @property
    def cells_revealed(self) -> int:
        """Number of cells already revealed."""
        return self.config.total_cells - self._cells_remaining

    @property
    def bomb_locations(self) -> Tuple[Tuple[int, int], ...]:
        """Positions of every bomb, in row-major order."""
        return self.grid.bomb_locations

    @property
    def triggered_bomb(self) -> Optional[Tuple[int, int]]:
        """Position of the bomb that lost the game, if any."""
        return self._triggered_bomb

    def is_revealed(self, row: int, col: int) -> bool:
        """Check if the cell at a position is revealed."""
        if not self.grid.in_bounds(row, col):
            return False
        return bool(self._revealed[row, col])

    def cell_state(self, row: int, col: int) -> Optional[CellState]:
        """Get reveal state at position, or None if invalid."""
        if not self.grid.in_bounds(row, col):
            return None
        if self._revealed[row, col]:
            return CellState.REVEALED
        return CellState.HIDDEN

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D int8 array where:
                -1 = hidden
                0-8 = revealed with adjacent bomb count
                9 = revealed bomb
        """
        values = self.grid.values
        obs = np.where(self._revealed, values, HIDDEN_OBSERVATION)
        obs[self._revealed & (values == BOMB)] = BOMB_OBSERVATION
        return obs.astype(np.int8)

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            Hidden (row, col) positions, or an empty list once the
            game is over.
        """
        if not self.is_playing:
            return []
        rows, cols = np.nonzero(~self._revealed)
        return [(int(row), int(col)) for row, col in zip(rows, cols)]

    def reset(self) -> None:
        """Reset board to initial state for a new game."""
        self._init_state()
