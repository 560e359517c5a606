# -*- coding: utf-8 -*-
"""
Stateful side of the 2048 game.

This module provides the `GameController` class, which holds the current game state and applies player moves.
"""

from .controller import GameController, GameEvent, GameStatus

__all__ = ["GameController", "GameEvent", "GameStatus"]
