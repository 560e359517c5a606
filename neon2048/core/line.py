"""
Slide and merge a single line of the board.
"""

from typing import NamedTuple

from numpy import array_equal, asarray, int64, ndarray, zeros

from neon2048.config import GRID_SIZE


class LineResult(NamedTuple):
    """Outcome of processing one line."""

    new_line: ndarray
    changed: bool
    score_gained: int


def process_line(line: ndarray) -> LineResult:
    """
    Slide a line toward index 0 and merge adjacent equal tiles.

    Parameters
    ----------
    line : ndarray
        ``GRID_SIZE`` cells of one row or column, oriented so that index 0 is the side tiles move to.

    Returns
    -------
    LineResult
        The new line, whether it differs from the input, and the sum of the merged values.

    Raises
    ------
    ValueError
        If the line does not hold exactly ``GRID_SIZE`` cells.

    Notes
    -----
    - Empty cells (zeros) are removed before comparing neighbours.
    - Merging is a single pass: a freshly merged tile never merges again in the same move, so
      ``[2, 2, 2, 2]`` becomes ``[4, 4, 0, 0]``.
    - A line counts as changed if any position differs, including a merge that moves nothing.
    """
    line = asarray(line, dtype=int64)
    if line.shape != (GRID_SIZE,):
        raise ValueError(f'Expected a line of {GRID_SIZE} cells, received shape {line.shape}')

    # ##: Remove empty cells.
    non_zero = line[line != 0]

    # ##: Merge pairs from left to right.
    merged = []
    score = 0
    i = 0
    while i < len(non_zero):
        if i + 1 < len(non_zero) and non_zero[i] == non_zero[i + 1]:
            value = int(non_zero[i]) * 2
            merged.append(value)
            score += value
            i += 2
        else:
            merged.append(int(non_zero[i]))
            i += 1

    # ##: Pad with empty cells on the right.
    new_line = zeros(GRID_SIZE, dtype=int64)
    new_line[: len(merged)] = merged

    return LineResult(new_line, not array_equal(new_line, line), score)
