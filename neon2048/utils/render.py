"""Text rendering of a board."""

from numpy import ndarray


def render_text(grid: ndarray, empty: str = '.') -> str:
    """
    Format a board as tab separated rows.

    Parameters
    ----------
    grid : ndarray
        The game board.
    empty : str, optional
        Symbol used for empty cells (default is ``'.'``).

    Returns
    -------
    str
        One line per row.
    """
    return '\n'.join(' \t'.join(str(value) if value else empty for value in row) for row in grid.tolist())
