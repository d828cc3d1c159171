"""
Gymnasium environment wrapper for Minesweeper.

Exposes a game session through the standard RL interface.
"""
import logging
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig
from .renderer import FrameRenderer
from .session import GameSession, GameState

logger = logging.getLogger(__name__)


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = opened cell with adjacent mine count
        - 9 = opened mine

    Actions:
        Discrete action space of size 2 * rows * columns.
        Action i < cells digs cell (i // columns, i % columns);
        action i >= cells toggles the flag on cell i - cells.

    Rewards:
        - +1 for a safe dig
        - +10 for winning the game
        - -10 for hitting a mine
        - 0 for a flag toggle
        - -0.1 for invalid action (dig on opened/flagged cell,
          flag on opened cell, before the first dig, or with no
          flags left)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode
        self._cells = self.config.total_cells

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )

        # One dig and one flag action per cell
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

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
        rng = random.Random(int(self.np_random.integers(2**31)))
        self.session = GameSession(self.config, rng=rng)
        self._steps = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Dig (row * columns + col) or flag (cells + that index).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        is_flag = action >= self._cells
        row, col = self._action_to_position(action % self._cells)

        if is_flag:
            reward = self._flag_reward(row, col)
        else:
            reward = self._dig_reward(row, col)

        observation = self.session.board.get_observation()
        terminated = self.session.is_over
        if terminated:
            logger.debug(
                "Episode ended %s after %d steps",
                self.session.state.name,
                self._steps,
            )

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, index: int) -> Tuple[int, int]:
        """Convert flat cell index to (row, col) position."""
        return index // self.config.columns, index % self.config.columns

    def _dig_reward(self, row: int, col: int) -> float:
        """Dig a cell and score the outcome."""
        if not self.session.board[row, col].is_hidden or self.session.is_over:
            return -0.1

        state = self.session.dig_at(row, col)
        if state == GameState.WON:
            return 10.0
        if state == GameState.LOST:
            return -10.0
        return 1.0

    def _flag_reward(self, row: int, col: int) -> float:
        """Toggle a flag; only structurally invalid toggles are penalised."""
        if self.session.state != GameState.PLAYING:
            return -0.1
        if not self._can_toggle_flag(row, col):
            return -0.1

        self.session.flag_at(row, col)
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        board = self.session.board
        return {
            "steps": self._steps,
            "flags_left": board.flags_left,
            "spaces_left": board.spaces_left,
            "game_state": self.session.state.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return FrameRenderer(color=False).render(self.session.board)
        if self.render_mode == "human":
            print(FrameRenderer().render(self.session.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            int8 array where 1 = valid action, laid out like the
            action space (digs first, then flags).
        """
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self.session.is_over:
            return mask
        can_flag = self.session.state == GameState.PLAYING
        for index, (row, col) in enumerate(self.session.board.positions()):
            if self.session.board[row, col].is_hidden:
                mask[index] = 1
            if can_flag and self._can_toggle_flag(row, col):
                mask[self._cells + index] = 1
        return mask

    def _can_toggle_flag(self, row: int, col: int) -> bool:
        """A flag can be removed, or placed while the budget lasts."""
        cell = self.session.board[row, col]
        if cell.flagged:
            return True
        return cell.is_hidden and self.session.board.flags_left > 0
