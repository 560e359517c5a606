"""
Board model for the 2048 game: grid representation, directions and basic queries.

A grid is a read-only ``int64`` array of shape ``(GRID_SIZE, GRID_SIZE)`` where ``0`` marks an empty cell.
"""

from enum import Enum
from numbers import Integral
from typing import Iterable, Optional, Sequence

from numpy import argwhere, array, int64, ndarray, zeros

from neon2048.config import GRID_SIZE


class Direction(str, Enum):
    """The four moves a player can make."""

    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value: 'Direction | str') -> 'Direction':
        """
        Convert a direction name into a ``Direction``.

        Parameters
        ----------
        value : Direction or str
            A direction member or its exact value (``'up'``, ``'down'``, ``'left'``, ``'right'``).

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Unknown direction: {value!r}') from None


def freeze(grid: ndarray) -> ndarray:
    """Mark a grid as read-only and return it."""
    grid.setflags(write=False)
    return grid


def check_grid(grid: ndarray) -> None:
    """
    Fail fast on a grid with the wrong dimensions.

    Raises
    ------
    ValueError
        If the grid is not a ``GRID_SIZE`` x ``GRID_SIZE`` array.
    """
    shape = getattr(grid, 'shape', None)
    if shape != (GRID_SIZE, GRID_SIZE):
        raise ValueError(f'Expected {GRID_SIZE}x{GRID_SIZE} grid, received shape {shape}')


# ##>: Largest power of two an int64 cell can hold.
MAX_TILE = 2**62


def _is_tile(value: int) -> bool:
    return value == 0 or (2 <= value <= MAX_TILE and value & (value - 1) == 0)


def as_grid(cells: Iterable[Sequence[Optional[int]]]) -> ndarray:
    """
    Build a validated grid from nested rows.

    Parameters
    ----------
    cells : Iterable[Sequence[Optional[int]]]
        Rows of cell values. ``None`` and ``0`` both mean an empty cell.

    Returns
    -------
    ndarray
        A new read-only grid.

    Raises
    ------
    ValueError
        If the rows do not form a square grid of size ``GRID_SIZE`` or a value is not a power of two between 2 and ``MAX_TILE``.
    """
    rows = [list(row) for row in cells]
    if len(rows) != GRID_SIZE or any(len(row) != GRID_SIZE for row in rows):
        raise ValueError(f'Expected {GRID_SIZE}x{GRID_SIZE} grid, received rows of lengths {[len(r) for r in rows]}')

    values = []
    for row in rows:
        converted = []
        for value in row:
            if value is None:
                value = 0
            if isinstance(value, bool) or not isinstance(value, Integral) or not _is_tile(int(value)):
                raise ValueError(f'Invalid cell value: {value!r}')
            converted.append(int(value))
        values.append(converted)

    return freeze(array(values, dtype=int64))


def to_cells(grid: ndarray) -> list[list[Optional[int]]]:
    """Convert a grid into nested lists, with ``None`` for empty cells."""
    return [[int(value) if value else None for value in row] for row in grid.tolist()]


def create_empty_grid() -> ndarray:
    """
    Create a grid where every cell is empty.

    Returns
    -------
    ndarray
        A read-only ``GRID_SIZE`` x ``GRID_SIZE`` grid of zeros.
    """
    return freeze(zeros((GRID_SIZE, GRID_SIZE), dtype=int64))


def empty_cells(grid: ndarray) -> list[tuple[int, int]]:
    """
    List the positions of the empty cells.

    Parameters
    ----------
    grid : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        ``(row, col)`` coordinates in row-major ascending order.

    Notes
    -----
    The order is stable so that a seeded generator always picks the same cell.
    """
    return [(int(row), int(col)) for row, col in argwhere(grid == 0)]


def max_tile(grid: ndarray) -> int:
    """Highest tile value on the board (0 for an empty board)."""
    return int(grid.max())
