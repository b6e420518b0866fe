"""
Slide and merge logic: the single-row merge and its mapping onto the four slide directions.
"""

from enum import IntEnum

from numpy import ndarray

from tilemerge.core.board import boards_equal, reverse_row, rotate_clockwise, rotate_counter_clockwise


class Direction(IntEnum):
    """Slide directions accepted by ``push``."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


def merge_row_left(row: ndarray) -> ndarray:
    """
    Slide every tile of a row toward index 0 and merge equal neighbours.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row (or, after a rotation, one column) of the board.

    Returns
    -------
    ndarray
        A new row of the same length after sliding and merging.

    Notes
    -----
    - The merge pass runs first: a nonzero value either merges into the pending target on its
      left, when both hold the same value, or becomes the new pending target.
    - A merged target is released, so a third equal value starts a new target. A tile is the
      product of at most one merge per slide.
    - The compaction pass then moves the remaining values to the front, keeping their order.

    Examples
    --------
    >>> merge_row_left(np.array([2, 0, 2, 2]))
    array([4, 2, 0, 0])

    >>> merge_row_left(np.array([2, 2, 2, 2]))
    array([4, 4, 0, 0])
    """
    result = row.copy()
    target = None

    # ##: Merge pass.
    for index, value in enumerate(result):
        if value == 0:
            continue
        if target is not None and result[target] == value:
            result[target] *= 2
            result[index] = 0
            target = None
        else:
            target = index

    # ##: Compaction pass.
    free = 0
    for index, value in enumerate(result):
        if value == 0:
            continue
        if free != index:
            result[free] = value
            result[index] = 0
        free += 1

    return result


def push_left(board: ndarray) -> ndarray:
    """Slide every row of the board toward the first column."""
    result = board.copy()
    for index, row in enumerate(board):
        result[index] = merge_row_left(row)
    return result


def push_right(board: ndarray) -> ndarray:
    """Slide every row of the board toward the last column."""
    result = board.copy()
    for index, row in enumerate(board):
        result[index] = reverse_row(merge_row_left(reverse_row(row)))
    return result


def push_up(board: ndarray) -> ndarray:
    """
    Slide the columns of the board through a clockwise rotation.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        ``rotate_counter_clockwise(push_left(rotate_clockwise(board)))``.

    Notes
    -----
    The clockwise rotation turns each column, read from the last row upwards, into a row. Tiles
    therefore gather toward the last row.
    """
    return rotate_counter_clockwise(push_left(rotate_clockwise(board)))


def push_down(board: ndarray) -> ndarray:
    """
    Slide the columns of the board through a counter-clockwise rotation.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        ``rotate_clockwise(push_left(rotate_counter_clockwise(board)))``.

    Notes
    -----
    Tiles gather toward the first row.
    """
    return rotate_clockwise(push_left(rotate_counter_clockwise(board)))


def push(direction: Direction, board: ndarray) -> ndarray:
    """
    Slide the whole board in the given direction.

    Parameters
    ----------
    direction : Direction
        The slide direction.
    board : ndarray
        The game board.

    Returns
    -------
    ndarray
        The board after sliding and merging. No tile is added.

    Raises
    ------
    ValueError
        If ``direction`` is not a ``Direction``.

    Notes
    -----
    The sum of all tile values is the same before and after the slide.
    """
    if direction == Direction.LEFT:
        return push_left(board)
    elif direction == Direction.RIGHT:
        return push_right(board)
    elif direction == Direction.UP:
        return push_up(board)
    elif direction == Direction.DOWN:
        return push_down(board)
    raise ValueError(f'Unknown direction: {direction!r}')


def legal_actions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that change the board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The directions whose slide changes at least one cell, in ``Direction`` order.
    """
    return [direction for direction in Direction if not boards_equal(push(direction, board), board)]


def illegal_actions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that leave the board unchanged.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        The directions whose slide is rejected, in ``Direction`` order.
    """
    legal = legal_actions(board)
    return [direction for direction in Direction if direction not in legal]
