"""
Structural operations on the game board: creation, equality, transpose, reversal and rotation.

Every function returns a new array and leaves its arguments untouched.
"""

from numpy import all as np_all
from numpy import array_equal, int64, ndarray, zeros


def new_board(size: int = 4) -> ndarray:
    """
    Create an empty square board.

    Parameters
    ----------
    size : int, optional
        The size of the square grid (default is 4).

    Returns
    -------
    ndarray
        A ``size x size`` board filled with zeros.
    """
    return zeros((size, size), dtype=int64)


def boards_equal(first: ndarray, second: ndarray) -> bool:
    """Check if two boards hold the same value in every cell."""
    return bool(array_equal(first, second))


def transpose(board: ndarray) -> ndarray:
    """
    Swap the roles of rows and columns.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        A new board where ``result[i, j] == board[j, i]``.
    """
    return board.T.copy()


def reverse_row(row: ndarray) -> ndarray:
    """Return a copy of the row with its elements in opposite order."""
    return row[::-1].copy()


def is_full(board: ndarray) -> bool:
    """
    Check if every cell of the board holds a tile.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    bool
        True if no cell is empty, False otherwise.
    """
    return bool(np_all(board != 0))


def rotate_clockwise(board: ndarray) -> ndarray:
    """
    Rotate the board a quarter turn clockwise.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        The transposed board with every row reversed.

    Notes
    -----
    Row ``i`` of the result is column ``i`` of the input read from the last row upwards.
    """
    result = transpose(board)
    for index, row in enumerate(result):
        result[index] = reverse_row(row)
    return result


def rotate_counter_clockwise(board: ndarray) -> ndarray:
    """
    Rotate the board a quarter turn counter-clockwise.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        The transposed board with the order of its rows reversed (the rows' contents are kept).

    Notes
    -----
    ``rotate_counter_clockwise(rotate_clockwise(board))`` gives back ``board``.
    """
    return transpose(board)[::-1].copy()
