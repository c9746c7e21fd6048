"""
Minesweeper board engine.

Provides grid generation, the reveal/flood-fill board, and an RL
environment with simple agents built on top of it.
"""
from .cell import BOMB, BOMB_DISPLAY, CellChange, CellState
from .grid import Grid, generate, neighbors
from .board import (
    Board,
    BoardConfig,
    GameState,
    RevealResult,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .environment import MinesweeperEnv, make_vec_env
from .agents import BaseAgent, RandomAgent
from .evaluation import Evaluator

__all__ = [
    "BOMB",
    "BOMB_DISPLAY",
    "CellChange",
    "CellState",
    "Grid",
    "generate",
    "neighbors",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinesweeperEnv",
    "make_vec_env",
    "BaseAgent",
    "RandomAgent",
    "Evaluator",
]
