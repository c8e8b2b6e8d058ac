"""
Board module for the Sweeper engine.

Implements the square game board with mine placement, neighbor counting,
flood-fill revealing, markers and game state management.
"""
import numbers
import random
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import CellMarked, GameFinished, InvalidConfiguration, OutOfBounds


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class RevealResult(Enum):
    """Outcome of a single reveal."""

    CONTINUE = auto()
    LOSS = auto()


LAYOUT_MINE = "*"
LAYOUT_SAFE = "."


@dataclass
class BoardConfig:
    """
    Configuration for a square board.

    Attributes:
        gridsize: Number of rows (and columns).
        num_mines: Total mines to place.
    """

    gridsize: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not _is_int(self.gridsize) or not _is_int(self.num_mines):
            raise InvalidConfiguration(
                "Grid size and mine count must be integers"
            )
        # numpy integers are accepted but stored as plain ints
        self.gridsize = int(self.gridsize)
        self.num_mines = int(self.num_mines)
        if self.gridsize < 1:
            raise InvalidConfiguration("Grid size must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.gridsize * self.gridsize
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.gridsize * self.gridsize


def _is_int(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Square game board.

    Cells are kept in one flat list indexed row-major
    (``row * gridsize + col``). Mines are placed once, at construction,
    using the supplied random source, or taken from ``mines`` when given.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    mines: InitVar[Optional[Iterable[int]]] = None
    show_mines: bool = False
    _mine_indices: FrozenSet[int] = field(
        default=frozenset(), init=False, repr=False
    )
    _grid: List[Cell] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)
    _move_count: int = field(default=0, init=False)
    _cells_revealed: int = field(default=0, init=False)

    def __post_init__(self, mines: Optional[Iterable[int]]) -> None:
        """Build the grid after dataclass creation."""
        if mines is None:
            chosen = self._sample_mine_indices()
        else:
            chosen = self._check_mine_indices(mines)
        self._mine_indices = frozenset(chosen)
        self._init_grid(self._mine_indices)
        self._calculate_adjacent_mines()

    @classmethod
    def create(
        cls,
        gridsize: int,
        num_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with randomly placed mines.

        Args:
            gridsize: Number of rows and columns.
            num_mines: Number of distinct mines to place.
            rng: Random source used for mine placement. A fresh unseeded
                ``random.Random`` is used when omitted.

        Raises:
            InvalidConfiguration: If gridsize or num_mines is out of range.
        """
        config = BoardConfig(gridsize, num_mines)
        return cls(config, rng if rng is not None else random.Random())

    @classmethod
    def from_layout(cls, rows: Sequence[str]) -> "Board":
        """
        Create a board from a picture of its mines.

        Args:
            rows: One string per row, '*' for a mine and '.' for a safe
                cell, e.g. ``["...", ".*.", "..."]``.

        Raises:
            InvalidConfiguration: If the layout is empty, not square, or
                uses any other character.
        """
        gridsize = len(rows)
        if gridsize == 0:
            raise InvalidConfiguration("Layout must have at least one row")
        mines = []
        for row, line in enumerate(rows):
            if len(line) != gridsize:
                raise InvalidConfiguration(
                    f"Layout row {row} has {len(line)} cells, expected {gridsize}"
                )
            for col, char in enumerate(line):
                if char == LAYOUT_MINE:
                    mines.append(row * gridsize + col)
                elif char != LAYOUT_SAFE:
                    raise InvalidConfiguration(
                        f"Unexpected layout character {char!r}"
                    )
        return cls(BoardConfig(gridsize, len(mines)), mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _sample_mine_indices(self) -> List[int]:
        """Draw num_mines distinct cell indices."""
        return self.rng.sample(
            range(self.config.total_cells), self.config.num_mines
        )

    def _check_mine_indices(self, indices: Iterable[int]) -> Set[int]:
        """Validate explicitly supplied mine positions."""
        mines = set()
        for index in indices:
            if not _is_int(index) or not 0 <= index < self.config.total_cells:
                raise InvalidConfiguration(f"Mine index {index!r} is off the grid")
            mines.add(int(index))
        if len(mines) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.num_mines} mines, got {len(mines)}"
            )
        return mines

    def _init_grid(self, mines: Set[int]) -> None:
        """Create the hidden grid with mines in place."""
        self._grid = [
            Cell(is_mine=index in mines)
            for index in range(self.config.total_cells)
        ]

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.gridsize):
            for col in range(self.gridsize):
                count = self._count_adjacent_mines(row, col)
                self._cell_at(row, col).adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._cell_at(neighbor_row, neighbor_col).is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _index(self, row: int, col: int) -> int:
        return row * self.gridsize + col

    def _cell_at(self, row: int, col: int) -> Cell:
        return self._grid[self._index(row, col)]

    def _get_neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get the Moore neighborhood of a cell, clipped to the grid.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, not including the center.
        """
        last = self.gridsize - 1
        neighbors = []
        for neighbor_row in range(max(0, row - 1), min(last, row + 1) + 1):
            for neighbor_col in range(max(0, col - 1), min(last, col + 1) + 1):
                if neighbor_row == row and neighbor_col == col:
                    continue
                neighbors.append((neighbor_row, neighbor_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return (
            _is_int(row) and _is_int(col)
            and 0 <= row < self.gridsize and 0 <= col < self.gridsize
        )

    def _check_position(self, row: int, col: int) -> None:
        if not self._is_valid_position(row, col):
            raise OutOfBounds(row, col, self.gridsize)

    def _check_playing(self) -> None:
        if self._game_state != GameState.PLAYING:
            raise GameFinished(f"Game is over ({self._game_state.name})")

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def count_neighbors(self, row: int, col: int) -> int:
        """
        Count mines among the up-to-8 cells around (row, col).

        Raises:
            OutOfBounds: If the position is off the grid.
        """
        self._check_position(row, col)
        return self._cell_at(row, col).adjacent_mines

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal the cell at the given position.

        A safe cell becomes visible; if none of its neighbors is a mine,
        the reveal spreads across the connected region of empty cells and
        its numbered border. The spread never enters marked cells, and a
        marked target is refused until its marker is removed.

        Every accepted call counts as one move, including a losing one.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            RevealResult.LOSS if the cell holds a mine, otherwise
            RevealResult.CONTINUE.

        Raises:
            OutOfBounds: If the position is off the grid.
            GameFinished: If the game is already won or lost.
            CellMarked: If the cell carries a marker.
        """
        self._check_position(row, col)
        self._check_playing()
        cell = self._cell_at(row, col)
        if cell.is_marked:
            raise CellMarked(row, col)

        self._move_count += 1
        if cell.is_mine:
            self._game_state = GameState.LOST
            return RevealResult.LOSS

        self._flood_reveal(row, col)
        self._check_win_condition()
        return RevealResult.CONTINUE

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal a safe cell and spread through zero-count neighbors."""
        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            cell = self._cell_at(current_row, current_col)
            if not cell.reveal():
                continue
            self._cells_revealed += 1

            if cell.adjacent_mines == 0:
                for neighbor in self._get_neighbors(current_row, current_col):
                    if self._cell_at(*neighbor).is_hidden:
                        pending.append(neighbor)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are visible."""
        safe_cells = self.config.total_cells - self.num_mines
        if self._cells_revealed >= safe_cells:
            self._game_state = GameState.WON

    def toggle_mark(self, row: int, col: int) -> bool:
        """
        Toggle the player's marker on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the marker was toggled, False if the cell is visible.

        Raises:
            OutOfBounds: If the position is off the grid.
            GameFinished: If the game is already won or lost.
        """
        self._check_position(row, col)
        self._check_playing()
        return self._cell_at(row, col).toggle_mark()

    def toggle_show_mines(self) -> bool:
        """Flip the mine display flag and return its new value."""
        self.show_mines = not self.show_mines
        return self.show_mines

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def gridsize(self) -> int:
        """Number of rows (and columns)."""
        return self.config.gridsize

    @property
    def mine_indices(self) -> FrozenSet[int]:
        """Row-major indices of the mines."""
        return self._mine_indices

    @property
    def num_mines(self) -> int:
        """Number of mines on the board."""
        return len(self._mine_indices)

    @property
    def move_count(self) -> int:
        """Number of reveals made so far."""
        return self._move_count

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def get_cell(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBounds: If the position is off the grid.
        """
        self._check_position(row, col)
        return self._cell_at(row, col)

    def cell_glyph(self, row: int, col: int) -> str:
        """
        Character used to draw the cell at (row, col).

        Raises:
            OutOfBounds: If the position is off the grid.
        """
        return self.get_cell(row, col).glyph(self.show_mines)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = marker
                0-8 = visible with adjacent count
        """
        obs = np.zeros((self.gridsize, self.gridsize), dtype=np.int8)
        for row in range(self.gridsize):
            for col in range(self.gridsize):
                obs[row, col] = self._cell_at(row, col).to_observation()
        return obs

    def hidden_positions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells still hidden.

        Returns:
            List of (row, col) positions, row-major order.
        """
        positions = []
        for row in range(self.gridsize):
            for col in range(self.gridsize):
                if self._cell_at(row, col).state == CellState.HIDDEN:
                    positions.append((row, col))
        return positions
