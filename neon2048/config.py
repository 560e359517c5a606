# -*- coding: utf-8 -*-
"""
Game and input configuration.
"""
from dataclasses import dataclass, field

# ##>: Board dimension, fixed for the whole game.
GRID_SIZE = 4

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def _is_power_of_two(value: int) -> bool:
    return value >= 2 and value & (value - 1) == 0


@dataclass
class GameConfig:
    """
    Rules of a game.

    Attributes
    ----------
    winning_tile : int
        Tile value that wins the game.
    initial_tiles : int
        Number of tiles spawned on a fresh board.
    tile_spawn_probs : dict[int, float]
        Probability of each value for a spawned tile.
    """

    winning_tile: int = 2048
    initial_tiles: int = 2
    tile_spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))

    def __post_init__(self):
        if not _is_power_of_two(self.winning_tile):
            raise ValueError(f"winning_tile must be a power of two >= 2, got {self.winning_tile}")
        if not 0 <= self.initial_tiles <= GRID_SIZE * GRID_SIZE:
            raise ValueError(f"initial_tiles must be in [0, {GRID_SIZE * GRID_SIZE}], got {self.initial_tiles}")
        if not self.tile_spawn_probs:
            raise ValueError("tile_spawn_probs must not be empty")
        for value, prob in self.tile_spawn_probs.items():
            if not _is_power_of_two(value):
                raise ValueError(f"Spawned tiles must be powers of two >= 2, got {value}")
            if prob < 0:
                raise ValueError(f"Spawn probability of {value} must be positive, got {prob}")
        total = sum(self.tile_spawn_probs.values())
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"tile_spawn_probs must sum to 1, got {total}")


@dataclass
class InputConfig:
    """How player input is turned into moves."""

    swipe_threshold: float = 50  # pixels
    keyboard_enabled: bool = True
    touch_enabled: bool = True

    def __post_init__(self):
        if self.swipe_threshold <= 0:
            raise ValueError(f"swipe_threshold must be > 0, got {self.swipe_threshold}")
