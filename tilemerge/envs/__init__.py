# -*- coding: utf-8 -*-
"""
Python implementation of the sliding-tile game.

This module provides the `TileMerge` class, which keeps the current board and applies the turn protocol.
"""

from .tilemerge import TileMerge

__all__ = ["TileMerge"]
