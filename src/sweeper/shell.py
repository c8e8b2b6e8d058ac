"""
Line-based terminal shell for playing on a Board.

Prints the grid, reads a position and a command letter, and forwards the
command to the board until the game is won, lost, or the player quits.
"""
from enum import Enum
from typing import Callable, Optional, Tuple

from .board import Board, GameState, RevealResult
from .errors import CellMarked, OutOfBounds


class Command(Enum):
    """Commands the player can issue."""

    MARK = "m"
    REVEAL = "r"
    QUIT = "q"


POSITION_PROMPT = "Enter row col:"
COMMAND_PROMPT = "Mark (m) or reveal (r)?"
LOSS_BANNER = "BANG!!!"
WIN_BANNER = "All mines found, you win!"


def render_grid(board: Board) -> str:
    """Draw the board as gridsize lines of gridsize glyphs."""
    return "\n".join(
        "".join(board.cell_glyph(row, col) for col in range(board.gridsize))
        for row in range(board.gridsize)
    )


def parse_coordinates(text: str) -> Tuple[int, int]:
    """
    Parse a "row col" line.

    Raises:
        ValueError: If the line does not hold exactly two integers.
    """
    parts = text.split()
    if len(parts) != 2:
        raise ValueError(f"Expected two numbers, got {text.strip()!r}")
    return int(parts[0]), int(parts[1])


def parse_command(text: str) -> Optional[Command]:
    """Map the first letter of a line to a Command, or None."""
    text = text.strip().lower()
    if not text:
        return None
    for command in Command:
        if text[0] == command.value:
            return command
    return None


class Shell:
    """
    Interactive turn loop around a Board.

    Input and output are injected so the loop can run against scripted
    lines as well as a real terminal.
    """

    def __init__(
        self,
        board: Board,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self.board = board
        self._input = input_fn
        self._output = output_fn

    def run(self) -> GameState:
        """
        Play until the game ends or the player quits.

        Returns:
            The board's game state when the loop stops.
        """
        try:
            while self.board.is_playing:
                self._output(render_grid(self.board))
                if not self._turn():
                    break
        except EOFError:
            pass
        return self.board.game_state

    def _turn(self) -> bool:
        """Run one prompt cycle. Returns False when the player quits."""
        line = self._input(POSITION_PROMPT)
        if parse_command(line) == Command.QUIT:
            return False
        try:
            row, col = parse_coordinates(line)
        except ValueError as error:
            self._output(str(error))
            return True

        command = parse_command(self._input(COMMAND_PROMPT))
        if command is None:
            return True
        if command == Command.QUIT:
            return False

        try:
            if command == Command.MARK:
                self.board.toggle_mark(row, col)
            elif self.board.reveal(row, col) == RevealResult.LOSS:
                self._finish(LOSS_BANNER)
            elif self.board.is_won:
                self._finish(WIN_BANNER)
        except (OutOfBounds, CellMarked) as error:
            self._output(str(error))
        return True

    def _finish(self, banner: str) -> None:
        """Show the whole minefield and the closing banner."""
        self.board.show_mines = True
        self._output(render_grid(self.board))
        self._output(banner)
