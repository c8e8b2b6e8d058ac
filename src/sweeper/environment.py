"""
Gymnasium environment wrapper for Sweeper.

Provides a standard RL interface so automated players can drive a Board.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .shell import render_grid


# ============================================================================
# Sweeper Environment
# ============================================================================

class SweeperEnv(gym.Env):
    """
    Gymnasium environment for Sweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = marker cell
        - 0-8 = visible cell with adjacent mine count

    Actions:
        Discrete action space of size gridsize * gridsize.
        Action i reveals the cell at (i // gridsize, i % gridsize).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (cell not hidden, or game already over)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        gridsize: int = 9,
        num_mines: int = 10,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Sweeper environment.

        Args:
            gridsize: Number of rows and columns.
            num_mines: Mines per board.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = BoardConfig(gridsize, num_mines)
        self.render_mode = render_mode
        self.board = self._new_board()

        self.observation_space = spaces.Box(
            low=-2,
            high=8,
            shape=(gridsize, gridsize),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0
        self._total_safe_cells = self.config.total_cells - num_mines

    def _new_board(self) -> Board:
        """Build a board whose mines come from the env's seeded generator."""
        seed = int(self.np_random.integers(0, 2**31 - 1))
        return Board(self.config, random.Random(seed))

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board = self._new_board()
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * gridsize + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return divmod(int(action), self.config.gridsize)

    def _calculate_reward(self, row: int, col: int) -> float:
        """
        Reveal a cell and score the result.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Reward value.
        """
        # Game already over, or cell visible or marked
        if not self.board.is_playing or not self.board.get_cell(row, col).is_hidden:
            return -0.1

        self.board.reveal(row, col)

        if self.board.is_won:
            return 10.0
        if self.board.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        obs = self.board.get_observation()
        return {
            "steps": self._steps,
            "moves": self.board.move_count,
            "revealed": int(np.count_nonzero(obs >= 0)),
            "total_safe": self._total_safe_cells,
            "game_state": self.board.game_state.name,
            "valid_actions": len(self.board.hidden_positions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_grid(self.board)
        if self.render_mode == "human":
            print(render_grid(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        return self.board.get_observation().flatten() == -1
