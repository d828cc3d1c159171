#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {beginner,intermediate,expert}] [--no-color]
    python main.py demo [--games N] [--delay S]
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO, Tuple

from demo import run_demo
from src.game.board import DIFFICULTIES, get_difficulty
from src.game.renderer import FrameRenderer
from src.game.session import Direction, GameSession

logger = logging.getLogger(__name__)

HELP = """\
h/j/k/l or left/down/up/right - move cursor
d [row col]                   - dig
f [row col]                   - flag
?                             - this help
q                             - quit"""

MOVES = {
    "h": Direction.LEFT,
    "left": Direction.LEFT,
    "j": Direction.DOWN,
    "down": Direction.DOWN,
    "k": Direction.UP,
    "up": Direction.UP,
    "l": Direction.RIGHT,
    "right": Direction.RIGHT,
}


def parse_target(args: List[str]) -> Optional[Tuple[int, int]]:
    """Parse optional 1-based "row col" arguments into a 0-based position."""
    if not args:
        return None
    if len(args) != 2:
        raise ValueError("expected a row and a column")
    row, col = (int(value) - 1 for value in args)
    return row, col


def handle_command(session: GameSession, line: str) -> bool:
    """
    Apply one command line to the session.

    Returns:
        False if the player asked to quit.
    """
    words = line.split()
    if not words:
        return True
    command, args = words[0].lower(), words[1:]

    if command in ("q", "quit"):
        return False
    if command in MOVES:
        # Past the longest side the cursor is pinned to an edge
        limit = max(session.config.rows, session.config.columns)
        for _ in range(min(int(args[0]), limit) if args else 1):
            session.move(MOVES[command])
        return True
    if command in ("d", "dig"):
        target = parse_target(args)
        if target is not None:
            session.dig_at(*target)
        else:
            session.dig()
        return True
    if command in ("f", "flag"):
        target = parse_target(args)
        if target is not None:
            session.flag_at(*target)
        else:
            session.flag()
        return True
    raise ValueError(f"unknown command {command!r}")


def play(args: argparse.Namespace, stdin: TextIO = sys.stdin) -> None:
    """Play one game, reading commands line by line."""
    config = get_difficulty(args.difficulty)
    session = GameSession(config)
    renderer = FrameRenderer(color=not args.no_color)
    logger.info(
        "New %s game: %dx%d, %d mines",
        args.difficulty,
        config.rows,
        config.columns,
        config.mine_count,
    )

    print("Type ? for help.")
    while not session.is_over:
        print(renderer.render(session.board, cursor=session.cursor))
        print(renderer.render_status(session.board))
        line = stdin.readline()
        if not line:
            break
        if line.strip() == "?":
            print(HELP)
            continue
        try:
            if not handle_command(session, line):
                break
        except ValueError as exc:
            print(f"Invalid command: {exc}")

    print(renderer.render(session.board))
    if session.is_won:
        print("You win!")
    elif session.is_lost:
        print("Boom. Game over.")


def demo(args: argparse.Namespace) -> None:
    """Watch the random agent play."""
    run_demo(
        config=get_difficulty(args.difficulty),
        games=args.games,
        delay=args.delay,
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="beginner",
        help="Board preset",
    )
    play_parser.add_argument(
        "--no-color", action="store_true", help="Disable ANSI colours"
    )

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch the random agent")
    demo_parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES),
        default="beginner",
        help="Board preset",
    )
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games to play"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Seconds between moves"
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
