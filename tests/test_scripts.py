"""
Tests for the terminal game loop and the random play evaluation.
"""

import io
from contextlib import redirect_stdout
from unittest import TestCase, main

from neon2048.core.board import as_grid
from neon2048.core.turn import GameState
from neon2048.envs import GameController
from neon2048.evaluate import evaluate
from neon2048.play import key_handler, play

EMPTY_ROW = [None, None, None, None]


class TestPlay(TestCase):
    """Key handling of the terminal game."""

    def setUp(self):
        state = GameState(grid=as_grid([[2, 2, None, None], EMPTY_ROW, EMPTY_ROW, EMPTY_ROW]))
        self.controller = GameController(seed=0, state=state)
        self.output = io.StringIO()

    def test_move_key(self):
        """Direction keys apply a move."""
        with redirect_stdout(self.output):
            self.assertTrue(key_handler(self.controller, "a"))
        self.assertEqual(self.controller.state.score, 4)
        self.assertIn("reward=4", self.output.getvalue())

    def test_quit_key(self):
        """Quit keys stop the loop."""
        self.assertFalse(key_handler(self.controller, "q"))

    def test_reset_key(self):
        """Reset keys start a new game."""
        with redirect_stdout(self.output):
            key_handler(self.controller, "a")
            key_handler(self.controller, "r")
        self.assertEqual(self.controller.state.score, 0)

    def test_unknown_key(self):
        """Unknown keys leave the game untouched."""
        before = self.controller.state
        with redirect_stdout(self.output):
            self.assertTrue(key_handler(self.controller, "x"))
        self.assertIs(self.controller.state, before)
        self.assertIn("unknown key", self.output.getvalue())

    def test_play_until_end_of_input(self):
        """The loop stops when input runs out."""
        keys = iter(["left", "d"])

        def read(prompt):
            try:
                return next(keys)
            except StopIteration:
                raise EOFError from None

        with redirect_stdout(self.output):
            play(self.controller, read=read)
        self.assertGreaterEqual(self.controller.state.score, 4)


class TestEvaluate(TestCase):
    """Random play over several games."""

    def test_evaluate_counts_games(self):
        """Every game is counted once under its maximum tile."""
        result = evaluate(length=3, seed=0)
        self.assertEqual(sum(result.values()), 3)
        for tile in result:
            self.assertGreaterEqual(tile, 4)
            self.assertEqual(tile & (tile - 1), 0)

    def test_evaluate_reproducible(self):
        """Same seed gives the same results."""
        self.assertEqual(evaluate(length=2, seed=5), evaluate(length=2, seed=5))


if __name__ == "__main__":
    main()
