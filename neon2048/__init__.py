# -*- coding: utf-8 -*-
"""
Python implementation of the 2048 sliding tile game.
"""

from .config import GRID_SIZE, GameConfig, InputConfig
from .core import Direction, GameState
from .envs import GameController, GameEvent, GameStatus

__all__ = [
    "GRID_SIZE",
    "GameConfig",
    "InputConfig",
    "Direction",
    "GameState",
    "GameController",
    "GameEvent",
    "GameStatus",
]
