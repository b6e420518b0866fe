# -*- coding: utf-8 -*-
"""
This module provides the rule engine of the sliding-tile game.

It includes the board primitives, the single-row merge, the four directional slides,
tile spawning, termination detection, score and the turn protocol.
"""

from .board import (
    boards_equal,
    is_full,
    new_board,
    reverse_row,
    rotate_clockwise,
    rotate_counter_clockwise,
    transpose,
)
from .gameboard import SPAWN_VALUE, initial_board, is_terminal, next_state, score, spawn_tile
from .gamemove import (
    Direction,
    illegal_actions,
    legal_actions,
    merge_row_left,
    push,
    push_down,
    push_left,
    push_right,
    push_up,
)

__all__ = [
    "new_board",
    "boards_equal",
    "transpose",
    "reverse_row",
    "is_full",
    "rotate_clockwise",
    "rotate_counter_clockwise",
    "Direction",
    "merge_row_left",
    "push_left",
    "push_right",
    "push_up",
    "push_down",
    "push",
    "legal_actions",
    "illegal_actions",
    "SPAWN_VALUE",
    "spawn_tile",
    "initial_board",
    "is_terminal",
    "score",
    "next_state",
]
