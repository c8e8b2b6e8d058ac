"""
Error types raised by the Sweeper engine.
"""


class SweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(SweeperError, ValueError):
    """Board parameters are outside the accepted range."""


class OutOfBounds(SweeperError, IndexError):
    """A row or column lies outside the grid."""

    def __init__(self, row: int, col: int, gridsize: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside a {gridsize}x{gridsize} grid"
        )
        self.row = row
        self.col = col
        self.gridsize = gridsize


class GameFinished(SweeperError):
    """An action was attempted after the game was won or lost."""


class CellMarked(SweeperError):
    """A reveal targeted a cell that carries a marker."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is marked; remove the marker to reveal it"
        )
        self.row = row
        self.col = col
