# -*- coding: utf-8 -*-
"""
Startup configuration and keyboard bindings.
"""
from dataclasses import dataclass

from tilemerge.core import Direction

BOARD_SIZE = 4
DEFAULT_SEED = 124

# ##: Movement keys, as reported by Matplotlib key events.
# ##>: UP gathers tiles toward the bottom row, so it sits on the "s" and down-arrow keys.
KEY_BINDINGS: dict[str, Direction] = {
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "s": Direction.UP,
    "w": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "down": Direction.UP,
    "up": Direction.DOWN,
}

EXIT_KEYS = frozenset({"q", "escape"})
RESET_KEYS = frozenset({"backspace"})


@dataclass
class GameConfig:
    """Settings fixed when a game starts."""

    size: int = BOARD_SIZE
    seed: int | None = DEFAULT_SEED
    title: str = "2048"

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")


def direction_for_key(key: str | None) -> Direction | None:
    """
    Map a key name to a slide direction.

    Parameters
    ----------
    key : str or None
        Key name reported by the window.

    Returns
    -------
    Direction or None
        The bound direction, or None for keys that do not move tiles.
    """
    if key is None:
        return None
    return KEY_BINDINGS.get(key.lower())
