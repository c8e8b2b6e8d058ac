"""
Cell module for the Sweeper engine.

Represents individual squares of the grid with their state
(hidden/visible/marker) and content (mine/neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    VISIBLE = auto()
    MARKER = auto()


HIDDEN_GLYPH = "X"
MARKER_GLYPH = "?"
EMPTY_GLYPH = " "
MINE_GLYPH = "*"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single square of the grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Set by the board when
            the cell is created and never changed afterwards.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, visible, or marker).
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Make this cell visible.

        Returns:
            True if the cell was hidden and is now visible, False if it
            was already visible or carries a marker.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.VISIBLE
        return True

    def toggle_mark(self) -> bool:
        """
        Toggle the player's marker on this cell.

        Returns:
            True if the marker was toggled, False if cell is visible.
        """
        if self.state == CellState.VISIBLE:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.MARKER
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_visible(self) -> bool:
        """Check if cell is visible."""
        return self.state == CellState.VISIBLE

    @property
    def is_marked(self) -> bool:
        """Check if cell carries a marker."""
        return self.state == CellState.MARKER

    def glyph(self, show_mines: bool = False) -> str:
        """
        Single character used to draw this cell.

        Args:
            show_mines: Draw mines as '*' regardless of their state.

        Returns:
            'X' hidden, '?' marker, ' ' visible with no adjacent mines,
            '1'-'8' visible with that many adjacent mines, '*' mine when
            show_mines is set.
        """
        if show_mines and self.is_mine:
            return MINE_GLYPH
        if self.state == CellState.HIDDEN:
            return HIDDEN_GLYPH
        if self.state == CellState.MARKER:
            return MARKER_GLYPH
        if self.adjacent_mines == 0:
            return EMPTY_GLYPH
        return str(self.adjacent_mines)

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Marker cell
            0-8: Visible cell with adjacent mine count
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.MARKER:
            return -2
        return self.adjacent_mines
