# tests/conftest.py
import os
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running from a plain checkout
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from snakeloop.core.interfaces import Direction
from snakeloop.core.loop import GameContext, GameLoop
from snakeloop.core.scheduler import FixedStepScheduler


class FakeMap:
    def __init__(self, dims=(32, 16), tile=10):
        self.dims = dims
        self.tile = tile
        self.refreshes = 0

    def get_dimensions(self):
        return self.dims

    def get_tile_size(self):
        return self.tile

    def refresh_food(self):
        self.refreshes += 1


class FakeSnake:
    def __init__(self, direction=Direction.RIGHT, die_after=None):
        self.direction = direction
        self.die_after = die_after   # updates until is_dead() turns true
        self.updates = 0
        self.set_calls = []

    def get_head_direction(self):
        return self.direction

    def set_head_direction(self, direction):
        self.set_calls.append(direction)
        self.direction = direction

    def update(self, game_map):
        self.updates += 1

    def is_dead(self):
        return self.die_after is not None and self.updates >= self.die_after


class FakeRenderer:
    def __init__(self):
        self.calls = []
        self.overlay = None

    def set_overlay(self, text):
        self.overlay = text

    def clear(self):
        self.calls.append(("clear",))

    def draw(self, game_map, alpha):
        self.calls.append(("draw", alpha))

    @property
    def draws(self):
        return [c for c in self.calls if c[0] == "draw"]


class FakeClock:
    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, dt):
        self.now += dt


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    # Plain Surface is fine for draw/blit tests (no need for display mode)
    return pg.Surface((320, 160), pg.SRCALPHA)

@pytest.fixture
def fakes():
    return FakeMap(), FakeSnake(), FakeRenderer()

@pytest.fixture
def loop_factory():
    def make(game_map=None, snake=None, renderer=None, steps_per_second=60, max_steps=None, **kwargs):
        ctx = GameContext(
            game_map=game_map or FakeMap(),
            snake=snake or FakeSnake(),
            renderer=renderer or FakeRenderer(),
            scheduler=FixedStepScheduler(steps_per_second, max_steps),
        )
        return GameLoop(ctx, **kwargs)
    return make
