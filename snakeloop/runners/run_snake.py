# snakeloop/runners/run_snake.py
from __future__ import annotations
import logging
from typing import Optional

from snakeloop.config import AppConfig
from snakeloop.core.grid import GridMap
from snakeloop.core.interfaces import FrameStats, GameState
from snakeloop.core.loop import GameContext, GameLoop
from snakeloop.core.scheduler import FixedStepScheduler
from snakeloop.core.snake import GridSnake
from snakeloop.telemetry import ALL_KEYS, CSVLogger, make_frame_logger


def build_context(cfg: AppConfig, renderer, keymap=None) -> GameContext:
    game_map = GridMap(cfg.grid_w, cfg.grid_h, cfg.tile_size, seed=cfg.seed)
    snake = GridSnake.centered(game_map, length=cfg.start_len, move_every=cfg.snake_move_every)
    game_map.refresh_food()
    ctx = GameContext(
        game_map=game_map,
        snake=snake,
        renderer=renderer,
        scheduler=FixedStepScheduler(cfg.steps_per_second, cfg.max_steps_per_frame),
    )
    if keymap is not None:
        ctx.keymap = keymap
    return ctx


def stop_when_over(loop: GameLoop):
    def _on_frame(stats: FrameStats) -> None:
        if stats.state is GameState.OVER:
            loop.stop()
    return _on_frame


def main(cfg: AppConfig, headless: bool = False, max_frames: Optional[int] = None) -> int:
    if cfg.debug:
        logging.getLogger("snakeloop").setLevel(logging.DEBUG)
    print("=== Snake ===")
    print(f"grid: {cfg.grid_w}x{cfg.grid_h}  tile: {cfg.tile_size}px  "
          f"steps/s: {cfg.steps_per_second}  move every: {cfg.snake_move_every}")

    if headless:
        from snakeloop.viz.renderer_headless import HeadlessRenderer
        rend = HeadlessRenderer()
        ctx = build_context(cfg, rend)
        loop = GameLoop(ctx)
        # no window and no keys: nothing left to show once the game is over
        loop.add_frame_hook(stop_when_over(loop))
    else:
        from snakeloop.viz.keyboard import Keyboard, pygame_keymap
        from snakeloop.viz.renderer_pygame import PygameRenderer
        rend = PygameRenderer()
        ctx = build_context(cfg, rend, keymap=pygame_keymap())
        rend.open(ctx.game_map, cfg)
        loop = GameLoop(ctx)
        kbd = Keyboard(ctx.inputs, on_quit=loop.stop)
        loop.poll_input = kbd.poll

    logger = None
    if cfg.stats_csv:
        logger = CSVLogger(cfg.stats_csv, fieldnames=ALL_KEYS)
        loop.add_frame_hook(make_frame_logger(logger, every_frames=cfg.stats_every))

    try:
        frames = loop.run(max_frames=max_frames)
    finally:
        rend.close()
        if logger is not None:
            logger.close()

    snake = ctx.snake
    print(f"[snake] frames={frames}  score={snake.score}  state={ctx.states.state.value}  "
          f"reason={snake.reason or ''}")
    return frames
