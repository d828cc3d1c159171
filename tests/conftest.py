"""
Pytest configuration and shared fixtures.
"""
import random
from typing import Iterable, Tuple

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Repository root, for the command-line entry point
sys.path.insert(1, str(Path(__file__).parent.parent))

from game import Board, BoardConfig, Cell, GameSession, MINE


def build_board(
    rows: int, columns: int, mines: Iterable[Tuple[int, int]]
) -> Board:
    """Create a board with mines at fixed positions and numbers set."""
    mines = list(mines)
    board = Board.blank(BoardConfig(rows, columns, len(mines)))
    for row, col in mines:
        board[row, col].content = MINE
    board.set_nums()
    return board


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """3x3 board with a single mine in the top-left corner."""
    return build_board(3, 3, [(0, 0)])


@pytest.fixture
def board_factory():
    """Factory for boards with mines at fixed positions."""
    return build_board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return build_board(5, 5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a wall of mines down column 2.

    Columns 0-1 and 3-4 are separate regions; opening (0, 0) floods
    only the left one.
    """
    return build_board(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def randomized_board() -> Board:
    """Beginner board with seeded mines and numbers."""
    board = Board.blank(BoardConfig(9, 9, 10))
    board.randomize(rng=random.Random(1234))
    board.set_nums()
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(content=MINE)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an opened cell with adjacent mines."""
    cell = Cell(content=3)
    cell.open()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session() -> GameSession:
    """Dense 9x9 session with a seeded random source."""
    return GameSession(BoardConfig(9, 9, 30), rng=random.Random(42))
