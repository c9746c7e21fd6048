"""
Gymnasium environment wrapper for Minesweeper.

Drives a Board through reveal requests and exposes the standard RL
interface for agents.
"""
from typing import Any, Dict, List, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, RevealResult
from .cell import BOMB_OBSERVATION, HIDDEN_OBSERVATION, CellChange


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent bomb count
        - 9 = revealed bomb

    Actions:
        Discrete action space of size size * size.
        Action i corresponds to cell at (i // size, i % size).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a bomb
        - -0.1 for a reveal that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
        placement: str = "retry",
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 bombs).
            render_mode: How to render the environment.
            placement: Bomb placement method passed to the board.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.placement = placement
        self.board = Board(self.config, rng=self.np_random, placement=placement)

        self.observation_space = spaces.Box(
            low=HIDDEN_OBSERVATION,
            high=BOMB_OBSERVATION,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._last_changes: List[CellChange] = []
        self._total_safe_cells = self.config.total_cells - self.config.num_bombs

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = Board(
            self.config, rng=self.np_random, placement=self.placement
        )
        self._steps = 0
        self._last_changes = []

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * size + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        result = self.board.reveal(row, col)
        self._last_changes = result.changes
        reward = self._calculate_reward(result)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row, col = divmod(int(action), self.config.size)
        return row, col

    def _calculate_reward(self, result: RevealResult) -> float:
        """
        Calculate reward for a reveal.

        Args:
            result: Outcome returned by the board.

        Returns:
            Reward value.
        """
        if result.is_empty:
            return -0.1
        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.cells_revealed,
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
            "changes": list(self._last_changes),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_observation(self.board.get_observation())
        if self.render_mode == "human":
            print(render_observation(self.board.get_observation()))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.size + col] = True
        return mask


def render_observation(obs: np.ndarray) -> str:
    """Render an observation as ASCII, one board row per line."""
    lines = []
    for row in obs:
        row_str = ""
        for val in row:
            if val == HIDDEN_OBSERVATION:
                row_str += "."
            elif val == BOMB_OBSERVATION:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)


# ============================================================================
# Vectorized Environment Factory
# ============================================================================

def make_vec_env(
    n_envs: int = 4,
    config: Optional[BoardConfig] = None,
) -> gym.vector.VectorEnv:
    """
    Create vectorized environment for parallel rollouts.

    Args:
        n_envs: Number of parallel environments.
        config: Board configuration.

    Returns:
        Vectorized environment.
    """
    def make_env() -> MinesweeperEnv:
        return MinesweeperEnv(config=config)

    return gym.vector.SyncVectorEnv([make_env for _ in range(n_envs)])
