# snakeloop/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Protocol, Optional


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    OVER = "over"


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Action(Enum):
    PAUSE = "pause"
    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"

    @property
    def direction(self) -> Optional[Direction]:
        return _ACTION_DIRS.get(self)


_ACTION_DIRS = {
    Action.MOVE_UP: Direction.UP,
    Action.MOVE_DOWN: Direction.DOWN,
    Action.MOVE_LEFT: Direction.LEFT,
    Action.MOVE_RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class FrameStats:
    frame_id: int
    dt: float            # seconds since previous frame
    steps: int           # logic steps due this frame (run or skipped)
    alpha: float         # interpolation factor handed to the renderer
    state: GameState     # state after the frame's logic
    keys: int            # raw keys drained this frame


class GameMap(Protocol):
    def get_dimensions(self) -> Tuple[int, int]: ...
    def get_tile_size(self) -> int: ...
    def refresh_food(self) -> None: ...


class Snake(Protocol):
    def get_head_direction(self) -> Direction: ...
    def set_head_direction(self, direction: Direction) -> None: ...
    def update(self, game_map: GameMap) -> None: ...
    def is_dead(self) -> bool: ...


class Renderer(Protocol):
    def clear(self) -> None: ...
    def draw(self, game_map: GameMap, alpha: float) -> None: ...
