"""
Board module for Minesweeper game.

Implements the game grid with safe-start mine placement, number
computation, flood-fill opening, chorded flagging and the counters
the front end reads back every frame.
"""
import random
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, MINE

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        columns: Number of columns.
        mines: Requested mine count; capped at rows * columns.
    """

    rows: int = 9
    columns: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.columns < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")

    @property
    def total_cells(self) -> int:
        return self.rows * self.columns

    @property
    def mine_count(self) -> int:
        """Mines actually placed on the board."""
        return min(self.mines, self.total_cells)


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def get_difficulty(name: str) -> BoardConfig:
    """
    Look up a preset configuration by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name.lower()]
    except KeyError:
        choices = ", ".join(DIFFICULTIES)
        raise ValueError(
            f"Unknown difficulty {name!r} (choose from {choices})"
        ) from None


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and implements every rule of the game.
    Coordinates are (row, col) and must lie inside the grid; the
    board does not validate them beyond what list indexing does.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _flags_left: int = 0
    _spaces_left: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._init_grid()

    @classmethod
    def blank(cls, config: Optional[BoardConfig] = None) -> "Board":
        """Create a board with no mines and every cell covered."""
        return cls(config or BoardConfig())

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.columns)]
            for _ in range(self.config.rows)
        ]
        self._refresh_counters()

    def _refresh_counters(self) -> None:
        """Recompute flags_left and spaces_left from the grid."""
        flagged = 0
        opened = 0
        for cell in self._cells():
            if cell.flagged:
                flagged += 1
            elif cell.opened:
                opened += 1
        self._flags_left = max(self.mine_count - flagged, 0)
        self._spaces_left = self.config.total_cells - opened

    def _cells(self) -> Iterator[Cell]:
        for row in self._grid:
            yield from row

    def clear(self) -> None:
        """Reset every cell in place and recompute counters."""
        for cell in self._cells():
            cell.clear()
        self._refresh_counters()

    def randomize(
        self,
        avoid: Iterable[Position] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Clear the board and scatter mines uniformly at random.

        Args:
            avoid: Positions that must stay mine-free (the first opened
                cell and, usually, its neighbors).
            rng: Random source; the module-level generator by default.

        Raises:
            ValueError: If too few positions remain outside ``avoid``.
        """
        self.clear()
        excluded = set(avoid)
        candidates = [pos for pos in self.positions() if pos not in excluded]
        if len(candidates) < self.mine_count:
            raise ValueError(
                f"Cannot place {self.mine_count} mines in "
                f"{len(candidates)} free cells"
            )
        for row, col in (rng or random).sample(candidates, self.mine_count):
            self._grid[row][col].content = MINE
        self._refresh_counters()

    def set_nums(self) -> None:
        """Set every non-mine cell to its count of neighboring mines."""
        for row, col in self.positions():
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.content = sum(
                1 for adj in self.adjacent_positions(row, col)
                if self[adj].is_mine
            )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def adjacent_positions(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, clipped at the grid edges.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.columns

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.config.rows):
            for col in range(self.config.columns):
                yield row, col

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, row: int, col: int) -> bool:
        """
        Open a cell and cascade through satisfied neighbors.

        A flagged cell is left alone. Once opened, a numbered cell whose
        flagged-neighbor count equals its number opens every neighbor
        that is neither opened nor flagged, and so on outward. A 0 cell
        therefore floods its blank region, and an opened cell that is
        already fully flagged works as a chord.

        Args:
            row: Row index to open.
            col: Column index to open.

        Returns:
            True if a mine was opened, anywhere in the cascade.
        """
        if self._grid[row][col].flagged:
            return False

        pending = [(row, col)]
        while pending:
            current = pending.pop()
            cell = self[current]
            if cell.open():
                self._spaces_left -= 1
            elif current != (row, col):
                continue

            if cell.is_mine:
                return True

            neighbors = self.adjacent_positions(*current)
            flags = sum(1 for adj in neighbors if self[adj].flagged)
            if flags == cell.content:
                pending.extend(adj for adj in neighbors if self[adj].is_hidden)
        return False

    def toggle_flag(self, row: int, col: int) -> None:
        """
        Toggle the flag on a covered cell, or chord-flag around an opened one.

        On an opened cell whose unopened-neighbor count equals its number,
        every covered, unflagged neighbor must be a mine and gets flagged.
        Flags are never placed once flags_left reaches 0.

        Args:
            row: Row index.
            col: Column index.
        """
        cell = self._grid[row][col]
        if not cell.opened:
            self._set_flag(cell, not cell.flagged)
            return

        neighbors = self.adjacent_positions(row, col)
        closed = sum(1 for adj in neighbors if not self[adj].opened)
        if closed == cell.content:
            for adj in neighbors:
                if self[adj].is_hidden:
                    self._set_flag(self[adj], True)

    def _set_flag(self, cell: Cell, flagged: bool) -> None:
        """Flag or unflag a cell, keeping flags_left in step."""
        if flagged and self._flags_left == 0:
            return
        if cell.set_flag(flagged):
            self._flags_left += -1 if flagged else 1

    def reveal(self) -> None:
        """Open every cell, dropping flags, to show the full layout."""
        for cell in self._cells():
            cell.open()
        self._refresh_counters()

    def flag_all(self) -> None:
        """Flag every cell that is still unopened."""
        for cell in self._cells():
            cell.set_flag(True)
        self._refresh_counters()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def __getitem__(self, position: Position) -> Cell:
        row, col = position
        return self._grid[row][col]

    def cell_at(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            IndexError: If the position is outside the grid.
        """
        if not self.is_valid_position(row, col):
            raise IndexError(f"Position {(row, col)} is outside the board")
        return self._grid[row][col]

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def columns(self) -> int:
        return self.config.columns

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def flags_left(self) -> int:
        """Mines left to flag: mine count minus flags placed."""
        return self._flags_left

    @property
    def spaces_left(self) -> int:
        """Cells not yet opened."""
        return self._spaces_left

    @property
    def is_cleared(self) -> bool:
        """Check if every non-mine cell has been opened."""
        return self._spaces_left == self.mine_count

    def hidden_positions(self) -> List[Position]:
        """Positions that can still be opened or flagged."""
        return [pos for pos in self.positions() if self[pos].is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = opened with adjacent count
                9 = opened mine
        """
        obs = np.zeros((self.config.rows, self.config.columns), dtype=np.int8)
        for row, col in self.positions():
            obs[row, col] = self._grid[row][col].to_observation()
        return obs
