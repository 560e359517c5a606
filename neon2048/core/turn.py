"""
Turn sequencing: pure transitions from one game state to the next.
"""

from dataclasses import dataclass
from typing import Any

from numpy import ndarray
from numpy.random import Generator

from neon2048.config import GameConfig
from neon2048.core.board import Direction, as_grid, create_empty_grid, to_cells
from neon2048.core.gamemove import move_grid
from neon2048.core.spawner import add_random_tile
from neon2048.core.terminal import has_won, is_game_over


@dataclass(frozen=True, eq=False)
class GameState:
    """
    Snapshot of a game.

    Attributes
    ----------
    grid : ndarray
        The read-only board. Any nested rows accepted by ``as_grid`` are validated and copied.
    score : int
        Sum of every merge so far.
    game_over : bool
        Whether no move can change the board.
    won : bool
        Whether the winning tile has appeared at any point of the game. Never reverts to False.
    """

    grid: ndarray
    score: int = 0
    game_over: bool = False
    won: bool = False

    def __post_init__(self):
        # ##>: Keep a validated read-only copy, never the caller's array.
        object.__setattr__(self, 'grid', as_grid(self.grid))

    def to_dict(self) -> dict[str, Any]:
        """Plain snapshot for renderers, with ``None`` for empty cells."""
        return {
            'grid': to_cells(self.grid),
            'score': self.score,
            'game_over': self.game_over,
            'won': self.won,
        }


def initialize_game(rng: Generator, config: GameConfig | None = None) -> GameState:
    """
    Create a fresh game.

    Parameters
    ----------
    rng : Generator
        Source of randomness for the initial tiles.
    config : GameConfig, optional
        Game rules.

    Returns
    -------
    GameState
        An empty board seeded with ``config.initial_tiles`` tiles, zero score and both flags False.
    """
    config = config or GameConfig()
    grid = create_empty_grid()
    for _ in range(config.initial_tiles):
        grid = add_random_tile(grid, rng, config)
    return GameState(grid=grid)


def _evaluate(state: GameState, grid: ndarray, score: int, config: GameConfig) -> GameState:
    return GameState(
        grid=grid,
        score=score,
        game_over=is_game_over(grid),
        won=state.won or has_won(grid, config.winning_tile),
    )


def apply_move(
    state: GameState, direction: Direction | str, rng: Generator, config: GameConfig | None = None
) -> GameState:
    """
    Play one turn.

    Parameters
    ----------
    state : GameState
        The current game.
    direction : Direction or str
        The move to apply.
    rng : Generator
        Source of randomness for the spawned tile.
    config : GameConfig, optional
        Game rules.

    Returns
    -------
    GameState
        The next game state, or ``state`` itself when the game is over or the move changes nothing.

    Raises
    ------
    ValueError
        If the direction is unknown.

    Notes
    -----
    - After an accepted move a tile is spawned, then both flags are computed on the resulting board.
    - ``won`` is the OR of the previous flag and the win check, so it never goes back to False.
    """
    direction = Direction.parse(direction)
    config = config or GameConfig()

    # ##: No move once the game is over.
    if state.game_over:
        return state

    new_grid, moved, score_gained = move_grid(state.grid, direction)
    if not moved:
        return state

    grid = add_random_tile(new_grid, rng, config)
    return _evaluate(state, grid, state.score + score_gained, config)


def spawn_tile(state: GameState, rng: Generator, config: GameConfig | None = None) -> GameState:
    """
    Add a random tile outside of a move, keeping the score.

    Returns ``state`` itself when the game is over or the board is full.
    """
    config = config or GameConfig()
    if state.game_over:
        return state

    grid = add_random_tile(state.grid, rng, config)
    if grid is state.grid:
        return state
    return _evaluate(state, grid, state.score, config)
