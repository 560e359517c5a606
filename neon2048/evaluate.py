# -*- coding: utf-8 -*-
"""
Play random games to exercise the engine and report the tiles reached.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Dict, Optional, Sequence

from tqdm import trange

from neon2048.core.board import max_tile
from neon2048.core.gamemove import legal_directions
from neon2048.core.spawner import make_rng
from neon2048.envs import GameController

logger = logging.getLogger(__name__)


def evaluate(length: int = 10, seed: Optional[int] = None, max_moves: int = 100_000) -> Dict[int, int]:
    """
    Play games with uniformly random legal moves.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed for both the moves and the spawned tiles.
    max_moves : int, optional
        Upper bound on the moves of a single game.

    Returns
    -------
    Dict[int, int]
        How many games ended with each maximum tile.
    """
    rng = make_rng(seed)
    controller = GameController(rng=rng)
    score = []

    with trange(length) as period:
        for num in period:
            if num:
                controller.reset()

            # ##: Play a game.
            moves = 0
            while not controller.is_finished and moves < max_moves:
                directions = legal_directions(controller.state.grid)
                if not directions:
                    break
                controller.move(directions[int(rng.integers(len(directions)))])
                moves += 1

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=controller.state.score, max=max_tile(controller.state.grid))

            # ##: Save max cells.
            logger.debug("Game %d finished after %d moves with score %d", num + 1, moves, controller.state.score)
            score.append(max_tile(controller.state.grid))

    # ##: Final log.
    frequency = Counter(score)
    return dict(frequency)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = ArgumentParser(description="Play random 2048 games.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())
    result = evaluate(length=args.games, seed=args.seed)
    print(f"Random play over {args.games} games, max tiles: {dict(sorted(result.items()))}")


if __name__ == "__main__":
    main()
