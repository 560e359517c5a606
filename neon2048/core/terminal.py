"""
End of game detection.
"""

from numpy import all as np_all
from numpy import any as np_any
from numpy import ndarray

from neon2048.core.board import check_grid


def is_game_over(grid: ndarray) -> bool:
    """
    Check if no move can change the board anymore.

    Parameters
    ----------
    grid : ndarray
        The current game board.

    Returns
    -------
    bool
        True if the game is over, False otherwise.

    Notes
    -----
    The game is over when there are no empty cells AND no horizontally or vertically adjacent cells share a value.
    """
    check_grid(grid)
    return bool(
        np_all(grid != 0) and not np_any(grid[:-1] == grid[1:]) and not np_any(grid[:, :-1] == grid[:, 1:])
    )


def has_won(grid: ndarray, winning_tile: int = 2048) -> bool:
    """Check if the winning tile is on the board."""
    check_grid(grid)
    return bool(np_any(grid == winning_tile))
