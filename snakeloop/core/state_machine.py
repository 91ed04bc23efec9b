# snakeloop/core/state_machine.py
from __future__ import annotations
import logging
from typing import Callable, List
from .interfaces import GameState

log = logging.getLogger(__name__)

Listener = Callable[[GameState, GameState], None]


class GameStateMachine:
    """Playing <-> Paused via the pause key; either goes to Over on loss.

    Over is terminal: nothing leaves it for the rest of the session.
    """

    def __init__(self, initial: GameState = GameState.PLAYING):
        self._state = initial
        self._listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def allows_logic(self) -> bool:
        return self._state is GameState.PLAYING

    @property
    def accepts_direction(self) -> bool:
        # Paused still takes steering input, as the original game did.
        return self._state is not GameState.OVER

    def add_listener(self, fn: Listener) -> None:
        self._listeners.append(fn)

    def toggle_pause(self) -> bool:
        if self._state is GameState.PLAYING:
            self._set(GameState.PAUSED)
        elif self._state is GameState.PAUSED:
            self._set(GameState.PLAYING)
        else:
            log.debug("pause toggle ignored in state %s", self._state.name)
            return False
        return True

    def lose(self) -> bool:
        if self._state is GameState.OVER:
            return False
        self._set(GameState.OVER)
        return True

    def _set(self, new: GameState) -> None:
        old, self._state = self._state, new
        log.info("game state %s -> %s", old.name, new.name)
        for fn in self._listeners:
            fn(old, new)
