# -*- coding: utf-8 -*-
"""
This module provides the pure rules of the 2048 game.

It includes the board model, sliding and merging of lines and grids, random tile spawning,
end of game detection and the turn transitions that combine them.
"""

from .board import Direction, as_grid, check_grid, create_empty_grid, empty_cells, max_tile, to_cells
from .gamemove import MoveResult, legal_directions, move_grid
from .line import LineResult, process_line
from .spawner import add_random_tile, make_rng
from .terminal import has_won, is_game_over
from .turn import GameState, apply_move, initialize_game, spawn_tile

__all__ = [
    "Direction",
    "as_grid",
    "check_grid",
    "create_empty_grid",
    "empty_cells",
    "max_tile",
    "to_cells",
    "LineResult",
    "process_line",
    "MoveResult",
    "move_grid",
    "legal_directions",
    "add_random_tile",
    "make_rng",
    "is_game_over",
    "has_won",
    "GameState",
    "initialize_game",
    "apply_move",
    "spawn_tile",
]
