"""Stateful sliding-tile game driven one input at a time."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.config import GameConfig
from tilemerge.core.gameboard import initial_board, is_terminal, next_state, score
from tilemerge.core.gamemove import Direction

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TileMerge:
    """
    Sliding-tile game.

    This class keeps the board currently displayed and applies the turn protocol to each input:
    slide, reject unchanged boards, spawn a tile, then check for the end of the game.
    """

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the game and its random number generator.

        Parameters
        ----------
        config : GameConfig, optional
            Board size and seed (default is ``GameConfig()``).
        """
        self.config = config if config is not None else GameConfig()
        self.size = self.config.size
        self._rng = default_rng(self.config.seed)
        self._board: ndarray | None = None
        self._moves = 0

        self.reset()

    @property
    def board(self) -> ndarray:
        """
        Get the current state of the game board.

        Returns
        -------
        ndarray
            The current board as a 2D numpy array.
        """
        return self._board

    @property
    def score(self) -> int:
        """Sum of the tiles on the current board."""
        return score(self._board)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if no slide can change the current board, False otherwise.
        """
        return is_terminal(self._board)

    @property
    def moves(self) -> int:
        """Number of accepted slides since the last reset."""
        return self._moves

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game from an empty board with one tile.

        Parameters
        ----------
        seed : int, optional
            New seed for the random number generator. The running generator is kept when omitted.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._board = initial_board(self.size, self._rng)
        self._moves = 0
        _logger.debug('New game on a %dx%d board', self.size, self.size)
        return self._board

    def step(self, direction: Direction | None) -> tuple[ndarray, int, bool]:
        """
        Apply one input to the board.

        Parameters
        ----------
        direction : Direction or None
            The requested slide. ``None`` leaves the game untouched.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The board to display (ndarray)
            - The score of that board (int)
            - Whether no slide can change that board anymore (bool)

        Notes
        -----
        - A rejected slide is a normal outcome: the board stays as it is and nothing is spawned.
        - A finished game still accepts input; every slide is then rejected.
        """
        if direction is None:
            return self._board, self.score, self.is_finished

        direction = Direction(direction)
        self._board, moved = next_state(self._board, direction, self._rng)
        if moved:
            self._moves += 1
        else:
            _logger.info('Cannot move %s', direction.name.lower())

        finished = self.is_finished
        if moved and finished:
            _logger.info('Game over after %d moves, score %d', self._moves, self.score)
        return self._board, self.score, finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._board.tolist():
            print(' \t'.join(map(str, row)))
        print(f'Score: {self.score}')
