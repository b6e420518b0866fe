# -*- coding: utf-8 -*-
"""
Play seeded random games without a window and summarize how they end.
"""
import logging
from collections import Counter
from typing import Dict, List

import numpy as np
from tqdm import trange

from tilemerge.config import DEFAULT_SEED, GameConfig
from tilemerge.core import legal_actions
from tilemerge.envs import TileMerge


def play_random_game(env: TileMerge, rng: np.random.Generator) -> int:
    """
    Play one game with uniformly chosen legal slides until the board is terminal.

    Parameters
    ----------
    env : TileMerge
        The game, already reset.
    rng : np.random.Generator
        Generator used to choose the slides.

    Returns
    -------
    int
        The final score.
    """
    done = env.is_finished
    while not done:
        actions = legal_actions(env.board)
        _, _, done = env.step(actions[rng.choice(len(actions))])
    return env.score


def evaluate(length: int = 10, size: int = 4, seed: int = DEFAULT_SEED) -> Dict[str, Dict[int, int]]:
    """
    Play random games and count final scores and maximum tiles.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    size : int, optional
        The size of the board (default is 4).
    seed : int, optional
        Seed of the first game; game ``n`` uses ``seed + n``.

    Returns
    -------
    Dict[str, Dict[int, int]]
        Frequencies of the maximum tile (``"max_tile"``) and of the final score (``"score"``).
    """
    env = TileMerge(GameConfig(size=size, seed=seed))
    policy = np.random.default_rng(seed)
    scores: List[int] = []
    max_tiles: List[int] = []

    with trange(length) as period:
        for num in period:
            env.reset(seed=seed + num)

            # ##: Play a game.
            scores.append(play_random_game(env, policy))
            max_tiles.append(int(np.max(env.board)))

            # ##: Log.
            period.set_description(f"Evaluation: {num + 1}")
            period.set_postfix(score=scores[-1], max=max_tiles[-1], moves=env.moves)

    return {"max_tile": dict(Counter(max_tiles)), "score": dict(Counter(scores))}


if __name__ == "__main__":
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    result = evaluate(length=args.games, size=args.size, seed=args.seed)
    print(f"Random play over {args.games} games, max tiles: {result['max_tile']}, scores: {result['score']}")
