"""
Random tile insertion.
"""

from numpy import ndarray
from numpy.random import PCG64DXSM, Generator

from neon2048.config import GameConfig
from neon2048.core.board import check_grid, empty_cells, freeze


def make_rng(seed: int | None = None) -> Generator:
    """
    Create the random generator used for spawning tiles.

    Parameters
    ----------
    seed : int, optional
        Seed for reproducible games.

    Returns
    -------
    Generator
        A NumPy generator backed by ``PCG64DXSM``.
    """
    return Generator(PCG64DXSM(seed))


def _pick_value(draw: float, tile_spawn_probs: dict[int, float]) -> int:
    cumulative = 0.0
    value = 0
    for value, prob in tile_spawn_probs.items():
        cumulative += prob
        if draw < cumulative:
            return value
    return value


def add_random_tile(grid: ndarray, rng: Generator, config: GameConfig | None = None) -> ndarray:
    """
    Place a new tile on a random empty cell.

    Parameters
    ----------
    grid : ndarray
        The current game board. It is never modified.
    rng : Generator
        Source of randomness.
    config : GameConfig, optional
        Game rules providing the spawn probabilities.

    Returns
    -------
    ndarray
        A new read-only grid with one more tile, or ``grid`` itself when the board is full.

    Notes
    -----
    - The cell is drawn uniformly among ``empty_cells(grid)``.
    - The value is drawn separately: 2 with probability 0.9 and 4 with probability 0.1 by default.
    """
    config = config or GameConfig()
    check_grid(grid)

    # ##: Nothing to do on a full board.
    available = empty_cells(grid)
    if not available:
        return grid

    position = available[int(rng.integers(len(available)))]
    value = _pick_value(float(rng.random()), config.tile_spawn_probs)

    new_grid = grid.copy()
    new_grid[position] = value
    return freeze(new_grid)
