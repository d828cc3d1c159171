"""
Unit tests for GameSession.

Tests cursor handling, first-dig generation, win/loss transitions and
command handling once the game is over.
"""
import logging
import random

import pytest
from game import (
    BoardConfig,
    Direction,
    GameSession,
    GameState,
)


def find_mine(session: GameSession):
    board = session.board
    return next(pos for pos in board.positions() if board[pos].is_mine)


# ============================================================================
# Cursor Tests
# ============================================================================

class TestCursor:
    """Test cursor movement."""

    def test_cursor_starts_top_left(self, session: GameSession) -> None:
        assert session.cursor == (0, 0)

    def test_move_directions(self, session: GameSession) -> None:
        """Each direction moves one cell."""
        session.move(Direction.DOWN)
        session.move(Direction.RIGHT)
        session.move(Direction.RIGHT)
        assert session.cursor == (1, 2)
        session.move(Direction.UP)
        session.move(Direction.LEFT)
        assert session.cursor == (0, 1)

    def test_move_clamps_at_edges(self, session: GameSession) -> None:
        """The cursor never leaves the grid."""
        session.move(Direction.UP)
        session.move(Direction.LEFT)
        assert session.cursor == (0, 0)
        assert session.move_to(100, 100) == (8, 8)
        session.move(Direction.DOWN)
        assert session.cursor == (8, 8)


# ============================================================================
# First Dig Tests
# ============================================================================

class TestFirstDig:
    """Test board generation on the first dig."""

    def test_new_session_is_ready(self, session: GameSession) -> None:
        """No mines exist before the first dig."""
        assert session.state == GameState.READY
        assert not any(
            session.board[pos].is_mine for pos in session.board.positions()
        )

    def test_first_dig_starts_game(self, session: GameSession) -> None:
        """The first dig generates mines and keeps playing."""
        state = session.dig_at(4, 4)
        assert state == GameState.PLAYING
        mines = sum(
            session.board[pos].is_mine for pos in session.board.positions()
        )
        assert mines == 30

    def test_first_dig_neighbourhood_is_safe(self) -> None:
        """The dug cell and its neighbors never hold mines."""
        for seed in range(50):
            session = GameSession(BoardConfig(9, 9, 10), rng=random.Random(seed))
            session.dig_at(0, 0)
            board = session.board
            assert board[0, 0].content == 0
            for pos in board.adjacent_positions(0, 0):
                assert board[pos].is_mine is False
            assert session.is_lost is False

    def test_crowded_board_keeps_only_dug_cell_safe(self) -> None:
        """A board too full for the neighborhood still spares the dug cell."""
        for seed in range(20):
            session = GameSession(BoardConfig(3, 3, 8), rng=random.Random(seed))
            assert session.dig_at(1, 1) == GameState.WON
            assert session.board[1, 1].content == 8

    def test_dig_uses_cursor(self, session: GameSession) -> None:
        """dig opens the cell under the cursor."""
        session.move_to(3, 5)
        session.dig()
        assert session.board[3, 5].opened is True

    def test_dig_at_moves_cursor(self, session: GameSession) -> None:
        session.dig_at(2, 7)
        assert session.cursor == (2, 7)

    def test_flag_before_first_dig_is_ignored(
        self, session: GameSession
    ) -> None:
        """Flags need a generated board."""
        assert session.flag_at(0, 0) == GameState.READY
        assert session.board[0, 0].flagged is False
        assert session.moves == 0


# ============================================================================
# Game End Tests
# ============================================================================

class TestGameEnd:
    """Test win and loss handling."""

    def test_digging_mine_loses_and_reveals(
        self, session: GameSession
    ) -> None:
        """A mine ends the game and opens the whole board."""
        session.dig_at(4, 4)
        assert session.dig_at(*find_mine(session)) == GameState.LOST
        assert session.is_over is True
        assert session.board.spaces_left == 0

    def test_clearing_board_wins_and_flags_mines(self) -> None:
        """A single-mine board is cleared by the safe start."""
        session = GameSession(BoardConfig(3, 3, 1), rng=random.Random(3))
        session.dig_at(2, 2)
        mine = find_mine(session)

        for pos in session.board.positions():
            if pos != mine and not session.board[pos].opened:
                session.dig_at(*pos)

        assert session.state == GameState.WON
        assert session.board[mine].flagged is True
        assert session.board.flags_left == 0

    def test_commands_ignored_after_game_over(
        self, session: GameSession
    ) -> None:
        """Nothing changes once the game has ended."""
        session.dig_at(4, 4)
        session.dig_at(*find_mine(session))
        moves = session.moves

        assert session.dig_at(0, 0) == GameState.LOST
        assert session.flag_at(0, 0) == GameState.LOST
        assert session.moves == moves

    def test_flag_toggles_on_board(self, session: GameSession) -> None:
        """Flags go through to the board during play."""
        session.dig_at(4, 4)
        target = find_mine(session)
        session.flag_at(*target)
        assert session.board[target].flagged is True
        assert session.board.flags_left == 29
        assert session.moves == 2

    def test_outcomes_are_logged(
        self, session: GameSession, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Losing is reported at INFO level."""
        with caplog.at_level(logging.INFO, logger="game.session"):
            session.dig_at(4, 4)
            session.dig_at(*find_mine(session))
        assert "Mine opened" in caplog.text
