"""
Game rules built on top of the slide logic: tile spawning, termination, score and the turn protocol.
"""

from numpy import argwhere, int64, ndarray
from numpy.random import Generator

from tilemerge.core.board import boards_equal, is_full, new_board
from tilemerge.core.gamemove import Direction, legal_actions, push

# ##: Value of every spawned tile.
SPAWN_VALUE = 2


def spawn_tile(board: ndarray, rng: Generator) -> ndarray:
    """
    Place a new tile in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. Not modified.
    rng : Generator
        Random number generator used to pick the cell.

    Returns
    -------
    ndarray
        A copy of the board with one more tile, of value 2.

    Raises
    ------
    ValueError
        If the board has no empty cell.

    Notes
    -----
    The cell is chosen uniformly among the empty cells.
    """
    available_cells = argwhere(board == 0)
    if len(available_cells) == 0:
        raise ValueError('Cannot spawn a tile on a full board')

    # ##: Randomly choose one empty cell.
    chosen = available_cells[rng.choice(len(available_cells))]

    result = board.copy()
    result[tuple(chosen)] = SPAWN_VALUE
    return result


def initial_board(size: int, rng: Generator) -> ndarray:
    """
    Create the starting board: an empty grid with one spawned tile.

    Parameters
    ----------
    size : int
        The size of the square grid.
    rng : Generator
        Random number generator used to pick the cell.

    Returns
    -------
    ndarray
        The new game board.
    """
    return spawn_tile(new_board(size), rng)


def is_terminal(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The board currently displayed, after any spawn.

    Returns
    -------
    bool
        True if no slide in any of the four directions changes the board, False otherwise.
    """
    return not legal_actions(board)


def score(board: ndarray) -> int:
    """
    Compute the score shown alongside the board.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    int
        The sum of all tile values on the board.
    """
    return int(board.sum(dtype=int64))


def next_state(board: ndarray, direction: Direction | None, rng: Generator) -> tuple[ndarray, bool]:
    """
    Apply one turn of the game.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    direction : Direction or None
        The requested slide. ``None`` means no input.
    rng : Generator
        Random number generator used to spawn the new tile.

    Returns
    -------
    new_state : ndarray
        The board after the turn.
    moved : bool
        Whether the slide was accepted.

    Notes
    -----
    - No input, or a slide that changes nothing, returns the board unchanged without spawning.
    - After an accepted slide a tile of value 2 is spawned, unless the board is full.
    - The generator is only consumed by the spawn.
    """
    if direction is None:
        return board, False

    candidate = push(direction, board)
    if boards_equal(candidate, board):
        return board, False

    if not is_full(candidate):
        candidate = spawn_tile(candidate, rng)
    return candidate, True
