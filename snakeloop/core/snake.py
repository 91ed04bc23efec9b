# snakeloop/core/snake.py  (movement + collision rules, no pygame)
from __future__ import annotations
from typing import List, Optional
import numpy as np
from .grid import Cell, GridMap
from .interfaces import Direction


class GridSnake:
    """Snake that advances one cell every ``move_every`` logic steps.

    The previous body is kept so the renderer can blend between the last two
    positions while the next move is pending.
    """

    def __init__(self, start: Cell, length: int = 3, direction: Direction = Direction.RIGHT, move_every: int = 1):
        if length < 1:
            raise ValueError(f"length must be >= 1, got {length}")
        if move_every < 1:
            raise ValueError(f"move_every must be >= 1, got {move_every}")
        dx, dy = direction.delta
        sx, sy = start
        # body trails behind the head, head first
        self.body: List[Cell] = [(sx - dx * i, sy - dy * i) for i in range(length)]
        self.prev_body: List[Cell] = list(self.body)
        self.direction = direction
        self.move_every = move_every
        self.score = 0
        self.step_count = 0
        self.move_count = 0
        self.reason: Optional[str] = None
        self._since_move = 0
        self._dead = False

    @classmethod
    def centered(cls, game_map: GridMap, length: int = 3, move_every: int = 1) -> "GridSnake":
        w, h = game_map.get_dimensions()
        snake = cls((w // 2, h // 2), length=length, direction=Direction.RIGHT, move_every=move_every)
        game_map.place_snake(snake)
        return snake

    @property
    def head(self) -> Cell:
        return self.body[0]

    def get_head_direction(self) -> Direction:
        return self.direction

    def set_head_direction(self, direction: Direction) -> None:
        self.direction = direction

    def is_dead(self) -> bool:
        return self._dead

    def update(self, game_map: GridMap) -> None:
        if self._dead:
            return
        self.step_count += 1
        self._since_move += 1
        if self._since_move < self.move_every:
            return
        self._since_move = 0
        self._move(game_map)

    def _move(self, game_map: GridMap) -> None:
        hx, hy = self.head
        dx, dy = self.direction.delta
        new_head = (hx + dx, hy + dy)

        # collisions
        if not game_map.is_inside(new_head):
            self._dead, self.reason = True, "wall"
            return
        grows = game_map.food == new_head
        # the tail cell frees up this move unless we grow
        blocking = self.body if grows else self.body[:-1]
        if new_head in blocking:
            self._dead, self.reason = True, "self"
            return

        self.prev_body = list(self.body)
        self.body.insert(0, new_head)
        if grows:
            game_map.consume_food(new_head)
            self.score += 1
            # new tail segment appears in place
            self.prev_body.append(self.prev_body[-1])
        else:
            self.body.pop()
        self.move_count += 1

    def motion_fraction(self, alpha: float) -> float:
        """How far (0..1) the snake is from ``prev_body`` toward ``body``."""
        if self.move_count == 0 or self._dead:
            return 1.0
        return min(1.0, (self._since_move + alpha) / self.move_every)

    def render_positions(self, alpha: float) -> np.ndarray:
        """(N, 2) float cell coordinates blended for smooth drawing."""
        t = self.motion_fraction(alpha)
        cur = np.asarray(self.body, dtype=np.float32)
        prev = np.asarray(self.prev_body, dtype=np.float32)
        return prev * (1.0 - t) + cur * t
