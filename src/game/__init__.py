"""
Minesweeper game module.

Provides the board engine, cell state, frame rendering, a single-game
session controller and a Gymnasium environment around it.
"""
from .cell import Cell, CellState, MINE
from .board import (
    Board,
    BoardConfig,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    get_difficulty,
)
from .renderer import FrameRenderer
from .session import Direction, GameSession, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "MINE",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "get_difficulty",
    "FrameRenderer",
    "Direction",
    "GameSession",
    "GameState",
    "MinesweeperEnv",
]
