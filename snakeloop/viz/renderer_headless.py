# snakeloop/viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
from snakeloop.core.interfaces import GameMap


class HeadlessRenderer:
    """Renderer that draws nothing; keeps counts for headless runs."""
    def __init__(self):
        self.clears = 0
        self.draws = 0
        self.last_alpha = 0.0
        self.overlay = ""

    def set_overlay(self, text: Optional[str]) -> None:
        self.overlay = text or ""

    def clear(self) -> None:
        self.clears += 1

    def draw(self, game_map: GameMap, alpha: float) -> None:
        self.draws += 1
        self.last_alpha = alpha

    def close(self) -> None:
        pass
