"""
Directional moves for the 2048 board, built on the single-line engine.
"""

from typing import NamedTuple

from numpy import ndarray, zeros_like

from neon2048.core.board import Direction, check_grid, freeze
from neon2048.core.line import process_line

# ##>: Directions that compact toward the high-index end of each line.
_REVERSED = (Direction.RIGHT, Direction.DOWN)

# ##>: Directions that operate on rows rather than columns.
_HORIZONTAL = (Direction.LEFT, Direction.RIGHT)


class MoveResult(NamedTuple):
    """Outcome of moving the whole grid."""

    new_grid: ndarray
    moved: bool
    score_gained: int


def move_grid(grid: ndarray, direction: Direction | str) -> MoveResult:
    """
    Slide and merge every line of the grid in one direction.

    Parameters
    ----------
    grid : ndarray
        The current game board. It is never modified.
    direction : Direction or str
        The move to apply.

    Returns
    -------
    MoveResult
        A new read-only grid, whether any line changed, and the total score of the merges.

    Raises
    ------
    ValueError
        If the grid has the wrong shape or the direction is unknown.

    Notes
    -----
    - Rows are processed for left/right, columns (top to bottom) for up/down.
    - For right/down each line is reversed before processing and reversed back afterward.
    - All lines are processed even when earlier ones did not change.
    """
    direction = Direction.parse(direction)
    check_grid(grid)

    horizontal = direction in _HORIZONTAL
    reverse = direction in _REVERSED
    lines = grid if horizontal else grid.T

    result = zeros_like(grid)
    moved = False
    score = 0

    for index, line in enumerate(lines):
        oriented = line[::-1] if reverse else line
        new_line, changed, gained = process_line(oriented)
        if reverse:
            new_line = new_line[::-1]

        if horizontal:
            result[index, :] = new_line
        else:
            result[:, index] = new_line

        moved = moved or changed
        score += gained

    return MoveResult(freeze(result), moved, score)


def legal_directions(grid: ndarray) -> list[Direction]:
    """
    Determine the moves that would change the board.

    Parameters
    ----------
    grid : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Directions, in enumeration order, for which ``move_grid`` reports a movement.
    """
    return [direction for direction in Direction if move_grid(grid, direction).moved]
