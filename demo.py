#!/usr/bin/env python3
"""Let a random player loose on SweeperEnv and print each board."""
import argparse

import numpy as np

from src.sweeper.environment import SweeperEnv


def play_random_game(env: SweeperEnv, rng: np.random.Generator, seed=None) -> str:
    """Reveal random hidden cells until the episode ends; return the result."""
    env.reset(seed=seed)
    terminated = False
    info = {}
    while not terminated:
        action = int(rng.choice(np.flatnonzero(env.get_action_mask())))
        _, _, terminated, _, info = env.step(action)
        print(f"reveal {divmod(action, env.config.gridsize)}")
        print(env.render(), end="\n\n")
    return info["game_state"]


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=6, help="Grid size (NxN)")
    parser.add_argument("--mines", type=int, default=4, help="Mines per board")
    parser.add_argument("--games", type=int, default=3, help="Games to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed for boards and moves")
    args = parser.parse_args()

    env = SweeperEnv(gridsize=args.size, num_mines=args.mines, render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    results = [
        play_random_game(env, rng, None if args.seed is None else args.seed + game)
        for game in range(args.games)
    ]
    print(f"{results.count('WON')}/{args.games} won: {', '.join(results)}")


if __name__ == "__main__":
    main()
