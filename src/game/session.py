"""
Game session for Minesweeper.

Drives a single board through one game: a clamped cursor, dig and flag
commands, board generation on the first dig and the win/loss follow-up
(flag everything, or reveal everything).
"""
import logging
import random
from enum import Enum, auto
from typing import List, Optional

from .board import BEGINNER, Board, BoardConfig, Position

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    READY = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


class Direction(Enum):
    """Cursor movements as (row, col) deltas."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game on one board.

    The board stays blank until the first dig, which scatters mines
    away from the dug cell and then opens it. Commands issued after
    the game has ended are ignored.
    """

    def __init__(
        self,
        config: BoardConfig = BEGINNER,
        rng: Optional[random.Random] = None,
        safe_neighbourhood: bool = True,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Board dimensions and mine count.
            rng: Random source used for mine placement.
            safe_neighbourhood: Keep the first dug cell's neighbors
                mine-free as well, when the board has room for it.
        """
        self.config = config
        self.board = Board.blank(config)
        self.rng = rng
        self.safe_neighbourhood = safe_neighbourhood
        self._state = GameState.READY
        self._cursor: Position = (0, 0)
        self.moves = 0

    # ========================================================================
    # Cursor
    # ========================================================================

    @property
    def cursor(self) -> Position:
        return self._cursor

    def move(self, direction: Direction) -> Position:
        """Move the cursor one cell, stopping at the edges."""
        delta_row, delta_col = direction.value
        row, col = self._cursor
        return self.move_to(row + delta_row, col + delta_col)

    def move_to(self, row: int, col: int) -> Position:
        """Place the cursor, clamped to the grid."""
        self._cursor = (
            min(max(row, 0), self.config.rows - 1),
            min(max(col, 0), self.config.columns - 1),
        )
        return self._cursor

    # ========================================================================
    # Commands
    # ========================================================================

    def dig(self) -> GameState:
        """Open the cell under the cursor."""
        return self.dig_at(*self._cursor)

    def dig_at(self, row: int, col: int) -> GameState:
        """
        Open a cell, generating the board first if needed.

        Returns:
            The game state after the dig.
        """
        if self.is_over:
            return self._state
        row, col = self.move_to(row, col)

        if self._state == GameState.READY:
            self._generate(row, col)

        self.moves += 1
        if self.board.open(row, col):
            self.board.reveal()
            self._state = GameState.LOST
            logger.info("Mine opened at %s after %d moves", (row, col), self.moves)
            return self._state

        self._check_cleared()
        return self._state

    def flag(self) -> GameState:
        """Toggle the flag under the cursor."""
        return self.flag_at(*self._cursor)

    def flag_at(self, row: int, col: int) -> GameState:
        """
        Toggle a flag, or chord-flag around an opened cell.

        Ignored until the board has been generated.
        """
        if self._state != GameState.PLAYING:
            return self._state
        row, col = self.move_to(row, col)
        self.moves += 1
        self.board.toggle_flag(row, col)
        self._check_cleared()
        return self._state

    def _generate(self, row: int, col: int) -> None:
        """Scatter mines away from the first dug cell and number the grid."""
        avoid = self._safe_zone(row, col)
        self.board.randomize(avoid, rng=self.rng)
        self.board.set_nums()
        self._state = GameState.PLAYING
        logger.debug(
            "Generated %dx%d board with %d mines avoiding %d cells",
            self.config.rows,
            self.config.columns,
            self.board.mine_count,
            len(avoid),
        )

    def _safe_zone(self, row: int, col: int) -> List[Position]:
        """
        Cells to keep mine-free on the first dig.

        Shrinks to the dug cell alone, then to nothing, when the board
        is too crowded to honor the larger zone.
        """
        free = self.config.total_cells - self.board.mine_count
        zone = [(row, col)]
        if self.safe_neighbourhood:
            zone += self.board.adjacent_positions(row, col)
        for size in (len(zone), 1, 0):
            if size <= free:
                return zone[:size]
        return []

    def _check_cleared(self) -> None:
        """Finish the game once only mines remain unopened."""
        if self.board.is_cleared:
            self.board.flag_all()
            self._state = GameState.WON
            logger.info("Board cleared in %d moves", self.moves)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def is_over(self) -> bool:
        """Check if the game has been won or lost."""
        return self._state in (GameState.WON, GameState.LOST)

    @property
    def is_won(self) -> bool:
        return self._state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self._state == GameState.LOST

