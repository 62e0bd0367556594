"""
Command line host for the Minesweeper board.

Usage:
    python main.py show [--width W] [--height H] [--mines M] [--seed S] [--reveal-all]
    python main.py play [--width W] [--height H] [--mines M] [--seed S]
"""
import argparse
import logging
import sys
from typing import List, Optional

from .board import Board
from .errors import BoardError

logger = logging.getLogger(__name__)

PLAY_USAGE = "Commands: r ROW COL (reveal), f ROW COL (flag), q (quit)"


def build_board(args: argparse.Namespace) -> Board:
    """Create a board from parsed arguments."""
    return Board.create(args.width, args.height, args.mines, seed=args.seed)


def show(args: argparse.Namespace) -> None:
    """Print a freshly built board, optionally fully revealed."""
    board = build_board(args)
    if args.reveal_all:
        for row in range(board.height):
            for col in range(board.width):
                board.reveal(row, col)
    print(board.render())


def apply_command(board: Board, line: str) -> bool:
    """
    Apply one interactive command to the board.

    Args:
        board: Board to act on.
        line: Raw input line.

    Returns:
        False when the player asked to quit, True otherwise.
    """
    parts = line.split()
    if not parts:
        print(PLAY_USAGE)
        return True
    if parts[0] == "q":
        return False

    if parts[0] not in ("r", "f") or len(parts) != 3:
        print(PLAY_USAGE)
        return True
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        print(PLAY_USAGE)
        return True

    try:
        if parts[0] == "r":
            result = board.reveal(row, col)
            if result.is_mine:
                print(f"Boom! ({row}, {col}) was a mine.")
        else:
            board.toggle_flag(row, col)
    except BoardError as exc:
        print(f"Error: {exc}")
        return True

    print(board.render())
    return True


def play(args: argparse.Namespace) -> None:
    """Run an interactive session until 'q' or end of input."""
    board = build_board(args)
    print(board.render())
    print(PLAY_USAGE)

    while True:
        try:
            line = input("> ")
        except EOFError:
            break
        if not apply_command(board, line):
            break

    logger.info(
        "Session ended: %d revealed, %d flagged",
        board.num_revealed, board.num_flagged,
    )


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=9, help="Number of columns")
    parser.add_argument("--height", type=int, default=9, help="Number of rows")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument(
        "--seed", type=int, default=None, help="RNG seed for mine placement"
    )


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper board")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    show_parser = subparsers.add_parser("show", help="Print a new board")
    _add_board_arguments(show_parser)
    show_parser.add_argument(
        "--reveal-all", action="store_true", help="Reveal every cell first"
    )

    play_parser = subparsers.add_parser("play", help="Play interactively")
    _add_board_arguments(play_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "show":
            show(args)
        elif args.command == "play":
            play(args)
        else:
            parser.print_help()
    except BoardError as exc:
        print(f"Error: {exc}")
        sys.exit(2)


if __name__ == "__main__":
    main()
