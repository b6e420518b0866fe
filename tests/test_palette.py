"""
Tests for the palette lookup and the Matplotlib window.
"""
import io
from contextlib import redirect_stdout
from types import SimpleNamespace
from unittest import TestCase, main

import matplotlib

matplotlib.use("Agg")

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.colors import to_rgba

from manuals_control import key_handler
from tilemerge.config import KEY_BINDINGS, RESET_KEYS, GameConfig
from tilemerge.envs import TileMerge
from tilemerge.utils import BLOCK_COLORS, color_index, tile_color
from tilemerge.utils.windows import WindowBoard


class TestPalette(TestCase):
    """Test the mapping from tile values to colors."""

    def test_palette_size(self):
        """Palette covers the empty cell and tiles up to 8192."""
        self.assertEqual(len(BLOCK_COLORS), 14)

    def test_color_index(self):
        """Index is the base-2 logarithm of the tile, 0 for an empty cell."""
        self.assertEqual(color_index(0), 0)
        self.assertEqual(color_index(2), 1)
        self.assertEqual(color_index(1024), 10)
        self.assertEqual(color_index(8192), 13)

    def test_color_index_not_clamped(self):
        """Tiles beyond the palette give indices beyond its end."""
        self.assertEqual(color_index(16384), 14)

    def test_color_index_every_tile(self):
        """Every tile of the palette maps to its own entry."""
        for exponent in range(1, len(BLOCK_COLORS)):
            self.assertEqual(color_index(2**exponent), exponent)
            self.assertEqual(tile_color(2**exponent), BLOCK_COLORS[exponent])

    def test_tile_color(self):
        """Tiles past the palette reuse its last color."""
        self.assertEqual(tile_color(0), BLOCK_COLORS[0])
        self.assertEqual(tile_color(2), BLOCK_COLORS[1])
        self.assertEqual(tile_color(32768), BLOCK_COLORS[-1])


class TestWindowBoard(TestCase):
    """Test the drawing of the board."""

    def setUp(self):
        self.window = WindowBoard(title="2048", size=4)
        self.env = TileMerge(GameConfig(seed=0))

    def tearDown(self):
        plt.close("all")

    def test_show_image(self):
        """Cells show their value and color, the title shows the score."""
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 4]])
        self.window.show_image(board, score=6)

        self.assertEqual(self.window.textes[0].get_text(), "2")
        self.assertEqual(self.window.textes[1].get_text(), "")
        self.assertEqual(self.window.textes[15].get_text(), "4")
        self.assertEqual(self.window.axes[0].get_facecolor(), to_rgba(BLOCK_COLORS[1]))
        self.assertEqual(self.window.axes[1].get_facecolor(), to_rgba(BLOCK_COLORS[0]))
        self.assertEqual(self.window.status.get_text(), "Score: 6")

    def test_show_game_over(self):
        """A finished game is announced next to the score."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.window.show_image(board, score=48, finished=True)
        self.assertEqual(self.window.status.get_text(), "Score: 48 - Game Over")

    def test_key_handler_moves(self):
        """A bound key plays one turn and redraws."""
        self.env._board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        key_handler(self.env, self.window, SimpleNamespace(key="a"))

        self.assertEqual(self.env.board[0, 0], 4)
        self.assertEqual(self.window.textes[0].get_text(), "4")
        self.assertEqual(self.window.status.get_text(), "Score: 6")

    def test_key_handler_ignores_other_keys(self):
        """Unbound keys leave the game as it is."""
        board = self.env.board.copy()
        key_handler(self.env, self.window, SimpleNamespace(key="x"))
        np.testing.assert_array_equal(self.env.board, board)

    def test_key_handler_exit(self):
        """Exit keys close the window."""
        key_handler(self.env, self.window, SimpleNamespace(key="q"))
        self.assertTrue(self.window.closed)

    def test_game_keys_released_from_shortcuts(self):
        """No move or reset key stays bound to a Matplotlib shortcut."""
        game_keys = set(KEY_BINDINGS) | RESET_KEYS
        for name in plt.rcParams:
            if name.startswith("keymap."):
                self.assertFalse(game_keys & set(plt.rcParams[name]), name)

    def test_game_over_printed_once(self):
        """The end of the game is announced on the accepted move only."""
        self.env._board = np.array([[0, 2, 4, 8], [4, 8, 16, 32], [8, 16, 32, 64], [16, 32, 64, 128]])

        output = io.StringIO()
        with redirect_stdout(output):
            key_handler(self.env, self.window, SimpleNamespace(key="a"))
        self.assertIn("Game over!", output.getvalue())

        # ##>: Later moves are rejected and stay silent.
        output = io.StringIO()
        with redirect_stdout(output):
            key_handler(self.env, self.window, SimpleNamespace(key="d"))
            key_handler(self.env, self.window, SimpleNamespace(key="s"))
        self.assertEqual(output.getvalue(), "")


if __name__ == "__main__":
    main()
