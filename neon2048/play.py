# -*- coding: utf-8 -*-
"""
Play 2048 Game in the terminal.
"""
import logging
from argparse import ArgumentParser
from typing import Callable, Optional, Sequence

from neon2048.core.board import Direction
from neon2048.envs import GameController, GameEvent
from neon2048.utils import key_to_direction

QUIT_KEYS = {"q", "quit", "escape"}
RESET_KEYS = {"r", "reset", "backspace"}


def reset(controller: GameController):
    """
    Reset and redraw the game board.

    Parameters
    ----------
    controller: GameController
        The game being played
    """
    controller.reset()
    controller.render()


def step(controller: GameController, direction: Direction):
    """
    Applied a move into the game.

    Parameters
    ----------
    controller: GameController
        The game being played

    direction: Direction
        Move to apply
    """
    before = controller.state
    after = controller.move(direction)
    if after is before:
        print("nothing moved")
        return

    print(f"reward={after.score - before.score}")
    controller.render()


def key_handler(controller: GameController, key: str) -> bool:
    """
    Handle one key typed by the player.

    Parameters
    ----------
    controller: GameController
        The game being played

    key: str
        Key to handle

    Returns
    -------
    bool
        False when the player asked to quit.
    """
    key = key.strip()

    if key.lower() in QUIT_KEYS:
        return False

    if key.lower() in RESET_KEYS:
        reset(controller)
        return True

    direction = key_to_direction(key) or key_to_direction(key.lower())
    if direction is not None:
        step(controller, direction)
    else:
        print(f"unknown key {key!r}, use w/a/s/d, r to restart, q to quit")
    return True


def play(controller: GameController, read: Callable[[str], str] = input) -> None:
    """
    Run the interactive loop until the player quits or input ends.

    Parameters
    ----------
    controller: GameController
        The game being played

    read: Callable[[str], str]
        Prompt function returning the next key
    """
    controller.subscribe(GameEvent.WON, lambda state: print("2048 reached! keep going..."))
    controller.subscribe(GameEvent.GAME_OVER, lambda state: print(f"terminated! final score {state.score}"))
    controller.render()

    while True:
        try:
            key = read("> ")
        except EOFError:
            break
        if not key_handler(controller, key):
            break


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = ArgumentParser(description="Play 2048 in the terminal.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    play(GameController(seed=args.seed))


if __name__ == "__main__":
    main()
