# -*- coding: utf-8 -*-
"""
Rule engine of a sliding-tile merging puzzle.
"""

from .config import GameConfig
from .core import Direction, is_terminal, next_state, push, score, spawn_tile
from .envs import TileMerge

__all__ = ["GameConfig", "Direction", "push", "spawn_tile", "is_terminal", "score", "next_state", "TileMerge"]
