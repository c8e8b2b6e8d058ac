"""
Sweeper puzzle module.

Provides the board engine (cells, mine placement, flood-fill reveal),
a terminal shell and a Gymnasium environment.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState, RevealResult
from .errors import (
    SweeperError,
    InvalidConfiguration,
    OutOfBounds,
    GameFinished,
    CellMarked,
)
from .shell import Command, Shell, render_grid, parse_command, parse_coordinates
from .environment import SweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "RevealResult",
    "SweeperError",
    "InvalidConfiguration",
    "OutOfBounds",
    "GameFinished",
    "CellMarked",
    "Command",
    "Shell",
    "render_grid",
    "parse_command",
    "parse_coordinates",
    "SweeperEnv",
]
