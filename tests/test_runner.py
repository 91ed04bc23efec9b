# tests/test_runner.py
import csv

from conftest import FakeClock, FakeSnake

from snakeloop.config import AppConfig
from snakeloop.core.interfaces import GameState
from snakeloop.main import config_from_args, main, parse_args
from snakeloop.runners.run_snake import build_context, stop_when_over
from snakeloop.runners.run_snake import main as run_snake
from snakeloop.viz.renderer_headless import HeadlessRenderer


def test_build_context_places_snake_and_food():
    cfg = AppConfig(seed=1, max_steps_per_frame=4)
    ctx = build_context(cfg, HeadlessRenderer())
    assert ctx.game_map.snake is ctx.snake
    assert ctx.game_map.food is not None
    assert ctx.scheduler.max_steps_per_frame == 4
    assert ctx.states.state is GameState.PLAYING


def test_headless_run_with_stats(tmp_path):
    out = tmp_path / "loop.csv"
    cfg = AppConfig(seed=0, stats_csv=str(out), stats_every=5)
    assert run_snake(cfg, headless=True, max_frames=10) == 10
    rows = list(csv.DictReader(out.open()))
    assert [r["frame"] for r in rows] == ["4", "9"]


def test_cli_args_map_to_config():
    args = parse_args(["--grid-w", "20", "--tile-size", "12", "--max-steps-per-frame", "0", "--no-hud"])
    cfg = config_from_args(args)
    assert (cfg.grid_w, cfg.tile_size) == (20, 12)
    assert cfg.max_steps_per_frame is None
    assert not cfg.render_show_hud


def test_main_exit_codes(capsys):
    assert main(["--headless", "--max-frames", "3"]) == 0
    assert main(["--headless", "--tile-size", "0"]) == 2
    assert "=== Snake ===" in capsys.readouterr().out


def test_stop_when_over_ends_an_unbounded_run(loop_factory):
    clock = FakeClock()
    loop = loop_factory(snake=FakeSnake(die_after=3), steps_per_second=50, clock=clock,
                        on_frame=[lambda stats: clock.advance(0.02)])
    loop.add_frame_hook(stop_when_over(loop))
    frames = loop.run()
    assert loop.stopped
    assert loop.ctx.states.state is GameState.OVER
    assert frames == 4   # zero-elapsed first frame, then one step per frame


def test_headless_run_without_frame_limit_stops_on_loss():
    # 8 cells wide: the snake hits the wall after a handful of moves
    cfg = AppConfig(grid_w=8, grid_h=4, seed=0, snake_move_every=1)
    frames = run_snake(cfg, headless=True)
    assert frames > 0
