# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
import numpy as np
from matplotlib import pyplot as plt

from tilemerge.config import KEY_BINDINGS, RESET_KEYS

from .palette import tile_color


def release_game_keys():
    """
    Remove the game's keys from Matplotlib's default shortcuts (save, back, forward, ...).
    """
    game_keys = set(KEY_BINDINGS) | RESET_KEYS
    for name in [name for name in plt.rcParams if name.startswith("keymap.")]:
        plt.rcParams[name] = [key for key in plt.rcParams[name] if key not in game_keys]


class WindowBoard:
    """
    Window to draw the board and its score using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    def __init__(self, title: str, size: int):
        # ## ----> Keep moves from triggering toolbar shortcuts.
        release_game_keys()

        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=0.9, wspace=0.05, hspace=0.05)
        self.axe.set_facecolor("#808080")
        self.fig.canvas.manager.set_window_title(title)

        self.axe.xaxis.set_ticks_position("none")
        self.axe.yaxis.set_ticks_position("none")
        _ = self.axe.set_xticklabels([])
        _ = self.axe.set_yticklabels([])

        # ## ----> Add cell for board.
        self.textes = []
        self.axes = [
            self.fig.add_subplot(size, size, r * size + c) for r in range(0, size) for c in range(1, size + 1)
        ]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                color="white",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
            )
            self.textes.append(text)
        for _ax in self.axes:
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Score line above the board.
        self.status = self.fig.suptitle("Score: 0", fontsize="large", fontweight="demibold")

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def show_image(self, board: np.ndarray, score: int, finished: bool = False):
        """
        Show the board or update the board being shown.

        Parameters
        ----------
        board: np.ndarray
            Board to draw
        score: int
            Score displayed above the board
        finished: bool
            Whether to announce the end of the game
        """
        # ## ----> Update the cells.
        values = np.reshape(board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            text.set_text(str(int(value)) if value else "")
            _ax.set_facecolor(tile_color(int(value)))

        # ## ----> Update the score line.
        status = f"Score: {score}"
        if finished:
            status += " - Game Over"
        self.status.set_text(status)

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close()
        self.closed = True
