"""
Cell module for Minesweeper.

Defines the per-cell reveal state and the change records the board
hands to presenters after each reveal.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


# ============================================================================
# Constants
# ============================================================================

BOMB = -1
BOMB_DISPLAY = "bomb"

# Observation encoding shared by the board and environment
HIDDEN_OBSERVATION = -1
BOMB_OBSERVATION = 9


class CellState(Enum):
    """Possible reveal states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()


# ============================================================================
# Cell Change
# ============================================================================

@dataclass(frozen=True)
class CellChange:
    """
    A single hidden -> revealed transition produced by a reveal.

    Attributes:
        row: Row index of the revealed cell.
        col: Column index of the revealed cell.
        value: Grid value of the cell (-1 for a bomb, otherwise 0-8).
    """

    row: int
    col: int
    value: int

    @property
    def is_bomb(self) -> bool:
        """Check if the revealed cell holds a bomb."""
        return self.value == BOMB

    @property
    def display_value(self) -> Optional[Union[str, int]]:
        """
        Value a presenter should show for this cell.

        Returns:
            "bomb" for a bomb, None for an empty cell, otherwise the
            neighbor count (1-8).
        """
        if self.value == BOMB:
            return BOMB_DISPLAY
        if self.value == 0:
            return None
        return self.value

    def to_observation(self) -> int:
        """Convert to the observation value used by agents."""
        if self.value == BOMB:
            return BOMB_OBSERVATION
        return self.value
