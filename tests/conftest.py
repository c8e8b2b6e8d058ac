"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return Board.create(9, 10, random.Random(1234))


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for flood-fill testing."""
    return Board.create(5, 0)


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with a single mine in the middle."""
    return Board.from_layout([
        "...",
        ".*.",
        "...",
    ])


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 5x5 board with one mine in the bottom-right corner."""
    return Board.from_layout([
        ".....",
        ".....",
        ".....",
        ".....",
        "....*",
    ])


@pytest.fixture
def walled_board() -> Board:
    """Create a 5x5 board split by a column of mines."""
    return Board.from_layout([
        "..*..",
        "..*..",
        "..*..",
        "..*..",
        "..*..",
    ])


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
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a visible cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)
