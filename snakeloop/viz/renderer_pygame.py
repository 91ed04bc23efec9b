# snakeloop/viz/renderer_pygame.py
from __future__ import annotations
import os
import numpy as np
import pygame as pg
from typing import Optional, Union
from snakeloop.config import AppConfig
from snakeloop.core.grid import GridMap
import snakeloop.viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cell = 10
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._overlay_text: str = ""
        self._font: Optional[pg.font.Font] = None

    def set_overlay(self, text: Optional[str]) -> None:
        self._overlay_text = text or ""

    def open(self, game_map: GridMap, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = game_map.get_tile_size()
        w, h = game_map.get_dimensions()

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((w * self.cell, h * self.cell))
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: Optional[AppConfig] = None, cell: Optional[int] = None) -> None:
        if not pg.get_init():
            pg.init()
        self.cfg = cfg or AppConfig()
        self.surf = surface
        if cell is not None:
            self.cell = cell
        self._auto_flip = False  # embedding surface owns the display

    def clear(self) -> None:
        assert self.surf is not None, "Renderer not opened"
        self.surf.fill(theme.BG)

    def draw(self, game_map: GridMap, alpha: float) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = game_map.get_tile_size()
        self.cell = c

        if game_map.food is not None:
            fx, fy = game_map.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        snake = game_map.snake
        if snake is not None:
            # draw tail first so the head stays on top
            pos = np.rint(snake.render_positions(alpha) * c).astype(int)
            for i in range(len(pos) - 1, -1, -1):
                x, y = pos[i]
                col = theme.HEAD if i == 0 else theme.BODY
                pg.draw.rect(surf, col, pg.Rect(int(x), int(y), c, c))

        if self.cfg.render_show_hud and snake is not None:
            txt = self._get_font().render(f"Score: {snake.score}", True, theme.TEXT)
            surf.blit(txt, (4, 2))

        if self._overlay_text:
            shade = pg.Surface(surf.get_size(), pg.SRCALPHA)
            shade.fill(theme.SHADE)
            surf.blit(shade, (0, 0))
            ovr = self._get_font().render(self._overlay_text, True, theme.BG)
            surf.blit(ovr, ovr.get_rect(center=surf.get_rect().center))

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self._font = None

    # internals
    def _get_font(self) -> pg.font.Font:
        if self._font is None:
            self._font = pg.font.SysFont(None, 20)
        return self._font

    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
