# tests/test_renderer.py
import pygame as pg

import snakeloop.viz.renderer_colors as theme
from snakeloop.config import AppConfig
from snakeloop.core.grid import GridMap
from snakeloop.core.snake import GridSnake
from snakeloop.viz.renderer_headless import HeadlessRenderer
from snakeloop.viz.renderer_pygame import PygameRenderer


def _rgb(c):
    cc = pg.Color(c)
    return (cc.r, cc.g, cc.b)

def _scene():
    m = GridMap(32, 16, 10, seed=0)
    s = GridSnake.centered(m, length=3)
    m.food = (2, 2)
    return m, s

def _renderer(screen, **cfg):
    r = PygameRenderer()
    r.attach_surface(screen, AppConfig(render_show_hud=False, **cfg))
    return r


def test_clear_fills_background(screen):
    r = _renderer(screen)
    r.clear()
    assert _rgb(screen.get_at((0, 0))) == theme.BG


def test_draw_food_and_snake_cells(screen):
    m, s = _scene()
    r = _renderer(screen)
    r.clear()
    r.draw(m, 0.0)
    assert _rgb(screen.get_at((25, 25))) == theme.FOOD        # food at cell (2, 2)
    hx, hy = s.head
    assert _rgb(screen.get_at((hx * 10 + 5, hy * 10 + 5))) == theme.HEAD
    tx, ty = s.body[-1]
    assert _rgb(screen.get_at((tx * 10 + 5, ty * 10 + 5))) == theme.BODY


def test_draw_interpolates_between_moves(screen):
    m, s = _scene()
    s.move_every = 2
    s.update(m); s.update(m)        # one move right, from (16, 8) to (17, 8)
    r = _renderer(screen)
    r.clear()
    r.draw(m, 1.0)                  # halfway: head spans x = 165..174
    assert _rgb(screen.get_at((166, 85))) == theme.HEAD
    assert _rgb(screen.get_at((176, 85))) == theme.BG


def test_overlay_shades_the_frame(screen):
    m, _ = _scene()
    r = _renderer(screen)
    r.set_overlay("PAUSED")
    r.clear()
    r.draw(m, 0.0)
    assert _rgb(screen.get_at((300, 150))) != theme.BG
    r.set_overlay("")
    r.clear()
    r.draw(m, 0.0)
    assert _rgb(screen.get_at((300, 150))) == theme.BG


def test_hud_draws_without_error(screen):
    m, _ = _scene()
    r = PygameRenderer()
    r.attach_surface(screen, AppConfig())
    r.clear()
    r.draw(m, 0.5)


def test_record_dir_saves_frames(screen, tmp_path):
    m, _ = _scene()
    r = _renderer(screen, render_record_dir=str(tmp_path))
    r.clear()
    r.draw(m, 0.0)
    r.draw(m, 0.0)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["frame_000000.png", "frame_000001.png"]


def test_headless_counts_calls():
    m, _ = _scene()
    r = HeadlessRenderer()
    r.clear()
    r.draw(m, 0.25)
    r.set_overlay("GAME OVER")
    assert (r.clears, r.draws, r.last_alpha) == (1, 1, 0.25)
    assert r.overlay == "GAME OVER"
    for text in ("PAUSED", "", "GAME OVER", None):
        r.set_overlay(text)
    assert r.overlay == ""
