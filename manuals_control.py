# -*- coding: utf-8 -*-
"""
Play the sliding-tile game with the keyboard.
"""
import logging
from argparse import ArgumentParser
from typing import Any

from tilemerge.config import DEFAULT_SEED, EXIT_KEYS, RESET_KEYS, GameConfig, direction_for_key
from tilemerge.envs import TileMerge
from tilemerge.utils.windows import WindowBoard

_logger = logging.getLogger(__name__)


def redraw(envs: TileMerge, window: WindowBoard):
    """
    Redraw the game board.

    Parameters
    ----------
    envs: TileMerge
        The game

    window: WindowBoard
        Class to draw the game board
    """
    window.show_image(envs.board, envs.score, envs.is_finished)


def reset(envs: TileMerge, window: WindowBoard):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    envs: TileMerge
        The game

    window: WindowBoard
        Class to draw the game board
    """
    envs.reset()
    redraw(envs, window)


def key_handler(envs: TileMerge, window: WindowBoard, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    envs: TileMerge
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    _logger.debug("pressed %s", event.key)

    if event.key in EXIT_KEYS:
        window.close()
        return None

    if event.key in RESET_KEYS:
        reset(envs, window)
        return None

    direction = direction_for_key(event.key)
    if direction is not None:
        moves = envs.moves
        _, score, terminated = envs.step(direction)
        redraw(envs, window)
        if terminated and envs.moves > moves:
            print(f"Game over! Score: {score}")
    return None


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--size", type=int, default=4)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    env = TileMerge(GameConfig(size=args.size, seed=args.seed))

    window_board = WindowBoard(title=env.config.title, size=env.size)
    window_board.register_key_handler(lambda event: key_handler(env, window_board, event))

    redraw(env, window_board)

    # Blocking event loop
    window_board.show(block=True)
