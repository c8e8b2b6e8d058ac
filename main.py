#!/usr/bin/env python3
"""
Sweeper - Main entry point.

Usage:
    python main.py play [--size N] [--mines M] [--seed S] [--show-mines]
"""
import argparse
import random
import sys

from src.sweeper.board import Board, GameState
from src.sweeper.errors import InvalidConfiguration
from src.sweeper.shell import Shell


def play(args: argparse.Namespace) -> int:
    """Play one game in the terminal."""
    try:
        board = Board.create(args.size, args.mines, random.Random(args.seed))
    except InvalidConfiguration as error:
        print(f"Invalid board: {error}")
        return 2

    if args.show_mines:
        board.toggle_show_mines()

    print(f"Board: {args.size}x{args.size} with {board.num_mines} mines")
    print("Type 'q' to quit.")
    result = Shell(board).run()

    print(f"\nMoves: {board.move_count}")
    return 0 if result != GameState.LOST else 1


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Sweeper - find the mines on a square grid"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--size", type=int, default=10, help="Grid size (NxN)"
    )
    play_parser.add_argument(
        "--mines", type=int, default=10, help="Number of mines"
    )
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )
    play_parser.add_argument(
        "--show-mines", action="store_true", help="Draw mines on the grid"
    )

    args = parser.parse_args()

    if args.command == "play":
        sys.exit(play(args))
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
