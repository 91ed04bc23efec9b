# snakeloop/core/direction_guard.py
from __future__ import annotations
import logging
from .interfaces import Direction, Snake

log = logging.getLogger(__name__)


class DirectionGuard:
    """Blocks an instant 180° turn into the snake's own body."""

    def validate(self, current: Direction, proposed: Direction) -> bool:
        return proposed is not current.opposite

    def apply(self, snake: Snake, proposed: Direction) -> bool:
        current = snake.get_head_direction()
        if not self.validate(current, proposed):
            log.debug("reversal %s -> %s ignored", current.name, proposed.name)
            return False
        snake.set_head_direction(proposed)
        return True
