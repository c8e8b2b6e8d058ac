"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
import pytest
from sweeper import Board, SweeperEnv


@pytest.fixture
def env() -> SweeperEnv:
    """Create a small seeded environment."""
    environment = SweeperEnv(gridsize=5, num_mines=3, render_mode="ansi")
    environment.reset(seed=7)
    return environment


def safe_action(env: SweeperEnv) -> int:
    for row, col in env.board.hidden_positions():
        if not env.board.get_cell(row, col).is_mine:
            return row * env.board.gridsize + col
    raise AssertionError("no safe cell left")


def mine_action(env: SweeperEnv) -> int:
    return min(env.board.mine_indices)


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_one_action_per_cell(self, env: SweeperEnv) -> None:
        assert env.action_space.n == 25

    def test_reset_observation_in_space(self, env: SweeperEnv) -> None:
        obs, info = env.reset(seed=1)
        assert env.observation_space.contains(obs)
        assert np.all(obs == -1)
        assert info["game_state"] == "PLAYING"
        assert info["valid_actions"] == 25

    def test_seeded_reset_is_reproducible(self, env: SweeperEnv) -> None:
        env.reset(seed=3)
        first = env.board.mine_indices
        env.reset(seed=3)
        assert env.board.mine_indices == first
        assert env.board.num_mines == 3


class TestStep:
    """Test stepping the environment."""

    def test_safe_reveal_rewards(self, env: SweeperEnv) -> None:
        obs, reward, terminated, truncated, info = env.step(safe_action(env))
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert info["moves"] == 1
        assert info["revealed"] >= 1
        assert terminated == (reward == 10.0)

    def test_mine_ends_episode(self, env: SweeperEnv) -> None:
        _, reward, terminated, _, info = env.step(mine_action(env))
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_repeated_action_penalized(self, env: SweeperEnv) -> None:
        """Acting on a visible or marked cell costs a small penalty."""
        env.board = Board.from_layout([
            "..*..",
            "..*..",
            "..*..",
            "..*..",
            "..*..",
        ])
        _, reward, terminated, _, _ = env.step(0)
        assert reward == 1.0
        assert terminated is False

        _, reward, _, _, info = env.step(0)
        assert reward == -0.1
        assert info["moves"] == 1

        env.board.toggle_mark(0, 4)
        _, reward, _, _, _ = env.step(4)
        assert reward == -0.1
        assert env.board.get_cell(0, 4).is_marked is True

    def test_step_after_win_is_penalized(self, env: SweeperEnv) -> None:
        """Stepping a finished episode does not raise."""
        env.board = Board.from_layout([
            ".....",
            ".....",
            ".....",
            ".....",
            "....*",
        ])
        _, reward, terminated, _, _ = env.step(0)
        assert reward == 10.0
        assert terminated is True

        _, reward, terminated, _, info = env.step(24)
        assert reward == -0.1
        assert terminated is True
        assert info["game_state"] == "WON"

    def test_action_mask_tracks_hidden_cells(self, env: SweeperEnv) -> None:
        env.step(safe_action(env))
        mask = env.get_action_mask()
        assert mask.dtype == bool
        assert mask.sum() == len(env.board.hidden_positions())

    def test_playing_every_safe_cell_wins(self, env: SweeperEnv) -> None:
        reward = 0.0
        while env.board.is_playing:
            _, reward, _, _, _ = env.step(safe_action(env))
        assert env.board.is_won is True
        assert reward == 10.0


class TestRender:
    """Test ansi and human rendering."""

    def test_render_ansi_returns_grid(self, env: SweeperEnv) -> None:
        text = env.render()
        assert text.split("\n") == ["XXXXX"] * 5

    def test_render_without_mode_returns_none(self) -> None:
        assert SweeperEnv(gridsize=3, num_mines=1).render() is None

    def test_render_human_prints_grid(self, capsys) -> None:
        env = SweeperEnv(gridsize=3, num_mines=1, render_mode="human")
        env.reset(seed=0)
        assert env.render() is None
        assert capsys.readouterr().out == "XXX\nXXX\nXXX\n"
