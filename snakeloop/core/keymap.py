# snakeloop/core/keymap.py
from __future__ import annotations
from typing import Dict, Hashable, Mapping, Optional
from .interfaces import Action

# Original controls: WASD to steer, space to pause.
DEFAULT_BINDINGS: Dict[str, Action] = {
    "w": Action.MOVE_UP,
    "a": Action.MOVE_LEFT,
    "s": Action.MOVE_DOWN,
    "d": Action.MOVE_RIGHT,
    "space": Action.PAUSE,
}


class KeyMap:
    """Maps raw key identifiers (pygame codes, strings, ...) to logical actions."""
    def __init__(self, bindings: Optional[Mapping[Hashable, Action]] = None):
        self._bindings: Dict[Hashable, Action] = dict(DEFAULT_BINDINGS if bindings is None else bindings)

    def resolve(self, key: Hashable) -> Optional[Action]:
        return self._bindings.get(key)

    def bind(self, key: Hashable, action: Action) -> None:
        self._bindings[key] = action

    def __contains__(self, key: Hashable) -> bool:
        return key in self._bindings
