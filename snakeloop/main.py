# snakeloop/main.py
import argparse
import logging
import sys

from snakeloop.config import AppConfig
from snakeloop.runners.run_snake import main as run_snake


def parse_args(argv=None):
    d = AppConfig()
    p = argparse.ArgumentParser(prog="snakeloop", description="Fixed-timestep snake game.")
    p.add_argument("--grid-w", type=int, default=d.grid_w)
    p.add_argument("--grid-h", type=int, default=d.grid_h)
    p.add_argument("--tile-size", type=int, default=d.tile_size)
    p.add_argument("--seed", type=int, default=d.seed)
    p.add_argument("--start-len", type=int, default=d.start_len)
    p.add_argument("--move-every", type=int, default=d.snake_move_every,
                   help="logic steps per cell moved")
    p.add_argument("--steps-per-second", type=int, default=d.steps_per_second)
    p.add_argument("--max-steps-per-frame", type=int, default=d.max_steps_per_frame,
                   help="catch-up cap; 0 disables the cap")
    p.add_argument("--record-dir", default=d.render_record_dir)
    p.add_argument("--no-hud", action="store_true")
    p.add_argument("--stats-csv", default=d.stats_csv)
    p.add_argument("--stats-every", type=int, default=d.stats_every)
    p.add_argument("--headless", action="store_true", help="run without a window")
    p.add_argument("--max-frames", type=int, default=None)
    p.add_argument("--debug", action="store_true")
    return p.parse_args(argv)


def config_from_args(args) -> AppConfig:
    return AppConfig().with_(
        grid_w=args.grid_w,
        grid_h=args.grid_h,
        tile_size=args.tile_size,
        seed=args.seed,
        start_len=args.start_len,
        snake_move_every=args.move_every,
        steps_per_second=args.steps_per_second,
        max_steps_per_frame=args.max_steps_per_frame or None,
        render_show_hud=not args.no_hud,
        render_record_dir=args.record_dir,
        stats_csv=args.stats_csv,
        stats_every=args.stats_every,
        debug=args.debug,
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = config_from_args(args)
    except ValueError as e:
        logging.getLogger("snakeloop").error("invalid configuration: %s", e)
        return 2
    run_snake(cfg, headless=args.headless, max_frames=args.max_frames)
    return 0


if __name__ == "__main__":
    sys.exit(main())
