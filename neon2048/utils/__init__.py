# -*- coding: utf-8 -*-
"""
This module provides utilities around the game: rendering boards as text and mapping player input to moves.
"""

from .controls import KEY_BINDINGS, key_to_direction, swipe_direction
from .render import render_text

__all__ = ["KEY_BINDINGS", "key_to_direction", "swipe_direction", "render_text"]
