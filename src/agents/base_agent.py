"""
Base agent interface for Minesweeper.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Actions follow MinesweeperEnv: indices below rows * columns dig a
    cell, the rest toggle a flag on cell (index - rows * columns).
    """

    def __init__(self, board_rows: int, board_columns: int) -> None:
        """
        Initialize the agent.

        Args:
            board_rows: Number of rows in the board.
            board_columns: Number of columns in the board.
        """
        self.board_rows = board_rows
        self.board_columns = board_columns
        self.total_cells = board_rows * board_columns

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index.
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert action index to the (row, col) it targets."""
        index = action % self.total_cells
        return index // self.board_columns, index % self.board_columns

    def position_to_action(self, row: int, col: int, flag: bool = False) -> int:
        """Convert (row, col) position to a dig or flag action index."""
        index = row * self.board_columns + col
        return index + self.total_cells if flag else index

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask over the full action space; hidden cells can
            be dug, hidden and flagged cells can be flagged.
        """
        flat_obs = observation.flatten()
        digs = flat_obs == -1
        flags = (flat_obs == -1) | (flat_obs == -2)
        return np.concatenate([digs, flags])

    def reset(self) -> None:
        """Reset agent state for new episode."""
