"""
Uniform random play for Minesweeper.

Baseline that digs any covered cell with equal probability and can
optionally spend part of its moves toggling flags.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Picks a legal move at random.

    By default it only digs, which makes it a lower bound for any
    agent that reads the numbers. With ``flag_rate`` > 0 it also
    toggles flags on that fraction of moves, when a flag move is legal.
    """

    def __init__(
        self,
        board_rows: int = 9,
        board_columns: int = 9,
        seed: Optional[int] = None,
        flag_rate: float = 0.0,
    ) -> None:
        super().__init__(board_rows, board_columns)
        if not 0.0 <= flag_rate <= 1.0:
            raise ValueError("flag_rate must be between 0 and 1")
        self.flag_rate = flag_rate
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Draw a dig (or, at ``flag_rate``, a flag) from the legal moves.

        Falls back to action 0 when the mask allows nothing; the
        environment scores that as an invalid move.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)
        valid_actions = np.asarray(valid_actions, dtype=bool)

        digs = np.flatnonzero(valid_actions[: self.total_cells])
        flags = np.flatnonzero(valid_actions[self.total_cells:])

        if flags.size and self.rng.random() < self.flag_rate:
            return int(self.total_cells + self.rng.choice(flags))
        if digs.size:
            return int(self.rng.choice(digs))
        return 0
