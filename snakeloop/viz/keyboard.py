# snakeloop/viz/keyboard.py
from __future__ import annotations
from typing import Callable, Dict, Optional
import pygame as pg
from snakeloop.core.input_buffer import InputBuffer
from snakeloop.core.interfaces import Action
from snakeloop.core.keymap import KeyMap


def pygame_keymap() -> KeyMap:
    bindings: Dict[int, Action] = {
        pg.K_w: Action.MOVE_UP,    pg.K_UP: Action.MOVE_UP,
        pg.K_a: Action.MOVE_LEFT,  pg.K_LEFT: Action.MOVE_LEFT,
        pg.K_s: Action.MOVE_DOWN,  pg.K_DOWN: Action.MOVE_DOWN,
        pg.K_d: Action.MOVE_RIGHT, pg.K_RIGHT: Action.MOVE_RIGHT,
        pg.K_SPACE: Action.PAUSE,
    }
    return KeyMap(bindings)


class Keyboard:
    """Pumps the pygame event queue into an InputBuffer once per frame."""
    def __init__(self, inputs: InputBuffer, on_quit: Optional[Callable[[], None]] = None):
        self.inputs = inputs
        self.on_quit = on_quit

    def poll(self) -> None:
        for e in pg.event.get():
            if e.type == pg.QUIT:
                self._quit()
            elif e.type == pg.KEYDOWN:
                if e.key == pg.K_ESCAPE:
                    self._quit()
                else:
                    self.inputs.push(e.key)

    def _quit(self) -> None:
        if self.on_quit is not None:
            self.on_quit()
