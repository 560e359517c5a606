"""Game controller holding the current state of a 2048 game."""

import logging
from enum import Enum
from typing import Callable

from numpy.random import Generator

from neon2048.config import GameConfig
from neon2048.core.board import Direction
from neon2048.core.spawner import make_rng
from neon2048.core.turn import GameState, apply_move, initialize_game, spawn_tile
from neon2048.utils.render import render_text

logger = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Controller states."""

    PLAYING = 'playing'
    OVER = 'over'


class GameEvent(str, Enum):
    """Flags whose first change to True can be observed."""

    WON = 'won'
    GAME_OVER = 'game_over'


EventHandler = Callable[[GameState], None]


class GameController:
    """
    2048 game controller.

    This class owns the single current ``GameState`` and replaces it wholesale after every accepted move.
    Moves must be applied one at a time by the caller.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: Generator | None = None,
        seed: int | None = None,
        state: GameState | None = None,
    ):
        """
        Initialize the controller.

        Parameters
        ----------
        config : GameConfig, optional
            Game rules (default is ``GameConfig()``).
        rng : Generator, optional
            Source of randomness, reused for the whole session. Built from ``seed`` when omitted.
        seed : int, optional
            Seed for the generator when ``rng`` is not given.
        state : GameState, optional
            Game to resume from. A fresh game is created when omitted.
        """
        self.config = config or GameConfig()
        self._rng = rng if rng is not None else make_rng(seed)
        self._handlers: dict[GameEvent, list[EventHandler]] = {event: [] for event in GameEvent}
        self._state = state if state is not None else initialize_game(self._rng, self.config)

    @property
    def state(self) -> GameState:
        """Current game snapshot."""
        return self._state

    @property
    def status(self) -> GameStatus:
        """``OVER`` once no move can change the board, ``PLAYING`` otherwise."""
        return GameStatus.OVER if self._state.game_over else GameStatus.PLAYING

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is finished (no more moves possible), False otherwise.
        """
        return self._state.game_over

    def subscribe(self, event: GameEvent, handler: EventHandler) -> None:
        """
        Register a handler called the first time a flag becomes True.

        Parameters
        ----------
        event : GameEvent
            The flag to observe.
        handler : Callable[[GameState], None]
            Called with the new state on the transition.

        Notes
        -----
        - The new state is already current when handlers run.
        - Exceptions raised by a handler propagate to the caller of the move. Handlers registered after it, and
          a ``GAME_OVER`` notification following ``WON`` in the same move, are then not called.
        """
        self._handlers[GameEvent(event)].append(handler)

    def unsubscribe(self, event: GameEvent, handler: EventHandler) -> None:
        """Remove a handler registered with ``subscribe``."""
        self._handlers[GameEvent(event)].remove(handler)

    def _replace(self, new_state: GameState) -> GameState:
        previous, self._state = self._state, new_state

        if new_state.won and not previous.won:
            logger.info('Winning tile reached with score %d', new_state.score)
            self._notify(GameEvent.WON, new_state)
        if new_state.game_over and not previous.game_over:
            logger.info('Game over with score %d', new_state.score)
            self._notify(GameEvent.GAME_OVER, new_state)
        return new_state

    def _notify(self, event: GameEvent, state: GameState) -> None:
        for handler in list(self._handlers[event]):
            handler(state)

    def move(self, direction: Direction | str) -> GameState:
        """
        Apply a move to the board.

        Parameters
        ----------
        direction : Direction or str
            The move to apply.

        Returns
        -------
        GameState
            The current state after the move.

        Notes
        -----
        - Nothing happens once the game is over or when the move does not change the board.
        - A new tile is added after each accepted move.
        """
        direction = Direction.parse(direction)
        new_state = apply_move(self._state, direction, self._rng, self.config)
        if new_state is self._state:
            logger.debug('Move %s ignored', direction.value)
            return self._state

        logger.debug('Move %s accepted, score %d -> %d', direction.value, self._state.score, new_state.score)
        return self._replace(new_state)

    def add_random_tile(self) -> GameState:
        """Spawn one tile on the current board without a move."""
        new_state = spawn_tile(self._state, self._rng, self.config)
        if new_state is self._state:
            return self._state
        return self._replace(new_state)

    def reset(self, seed: int | None = None) -> GameState:
        """
        Start a new game, whatever the current state.

        Parameters
        ----------
        seed : int, optional
            Reseed the generator before creating the new board.

        Returns
        -------
        GameState
            The fresh game.
        """
        if seed is not None:
            self._rng = make_rng(seed)
        self._state = initialize_game(self._rng, self.config)
        logger.debug('Game reset')
        return self._state

    def render(self) -> None:
        """
        Render the game board. This method prints the current score and board to the console.
        """
        print(f'score: {self._state.score}')
        print(render_text(self._state.grid))
