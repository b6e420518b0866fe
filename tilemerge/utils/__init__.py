# -*- coding: utf-8 -*-
"""
This module provides the presentation helpers: the tile palette, and in `windows` the `WindowBoard` class
drawing the board with Matplotlib.
"""

from .palette import BLOCK_COLORS, color_index, tile_color

__all__ = ["BLOCK_COLORS", "color_index", "tile_color"]
