"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine sentinel or adjacency count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

MINE = 9


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A single state field keeps "opened" and "flagged" mutually exclusive.

    Attributes:
        content: Adjacent mine count (0-8), or MINE for a mine.
        state: Current visual state (hidden, revealed, or flagged).
    """

    content: int = 0
    state: CellState = CellState.HIDDEN

    def open(self) -> bool:
        """
        Mark this cell as opened, dropping any flag.

        Returns:
            True if the cell was not opened before.
        """
        if self.state == CellState.REVEALED:
            return False
        self.state = CellState.REVEALED
        return True

    def set_flag(self, flagged: bool) -> bool:
        """
        Place or remove a flag.

        Returns:
            True if the state changed, False if cell is opened or
            already in the requested state.
        """
        if self.state == CellState.REVEALED or self.flagged == flagged:
            return False
        self.state = CellState.FLAGGED if flagged else CellState.HIDDEN
        return True

    def clear(self) -> None:
        """Reset to an empty, hidden cell."""
        self.content = 0
        self.state = CellState.HIDDEN

    @property
    def is_mine(self) -> bool:
        """Check if cell holds the mine sentinel."""
        return self.content == MINE

    @property
    def opened(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither opened nor flagged."""
        return self.state == CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Opened cell with adjacent mine count
            9: Opened mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        return self.content
