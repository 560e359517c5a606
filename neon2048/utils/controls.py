"""
Translate raw player input (keys and swipes) into moves.
"""

from typing import Optional

from neon2048.config import InputConfig
from neon2048.core.board import Direction

# ##: Keys mapped to moves.
KEY_BINDINGS: dict[str, Direction] = {
    'ArrowUp': Direction.UP,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
    'ArrowRight': Direction.RIGHT,
    'up': Direction.UP,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'right': Direction.RIGHT,
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}


def key_to_direction(key: str, config: InputConfig | None = None) -> Optional[Direction]:
    """
    Find the move bound to a key.

    Parameters
    ----------
    key : str
        Key name, e.g. ``'ArrowUp'`` or ``'w'``.
    config : InputConfig, optional
        Input settings.

    Returns
    -------
    Direction or None
        The bound move, or None for unbound keys or when the keyboard is disabled.
    """
    config = config or InputConfig()
    if not config.keyboard_enabled:
        return None
    return KEY_BINDINGS.get(key)


def swipe_direction(
    start: tuple[float, float], end: tuple[float, float], config: InputConfig | None = None
) -> Optional[Direction]:
    """
    Find the move matching a swipe gesture.

    Parameters
    ----------
    start : tuple[float, float]
        ``(x, y)`` where the touch began, in screen coordinates (y grows downward).
    end : tuple[float, float]
        ``(x, y)`` where the touch ended.
    config : InputConfig, optional
        Input settings providing the swipe threshold.

    Returns
    -------
    Direction or None
        The move along the dominant axis, or None when the swipe is not longer than the threshold.
    """
    config = config or InputConfig()
    if not config.touch_enabled:
        return None

    delta_x = end[0] - start[0]
    delta_y = end[1] - start[1]
    threshold = config.swipe_threshold

    if abs(delta_x) > abs(delta_y):
        if delta_x > threshold:
            return Direction.RIGHT
        if delta_x < -threshold:
            return Direction.LEFT
        return None

    if delta_y > threshold:
        return Direction.DOWN
    if delta_y < -threshold:
        return Direction.UP
    return None
