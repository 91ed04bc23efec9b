# snakeloop/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # map (original window: 32x16 tiles of 10px)
    grid_w: int = 32
    grid_h: int = 16
    tile_size: int = 10
    seed: Optional[int] = None

    # snake
    start_len: int = 3
    snake_move_every: int = 10          # logic steps per cell moved

    # timing
    steps_per_second: int = 60
    max_steps_per_frame: Optional[int] = 15   # None = unbounded catch-up

    # render
    render_title: str = "Snake"
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # telemetry
    stats_csv: Optional[str] = None
    stats_every: int = 60               # frames between CSV rows
    debug: bool = False

    def __post_init__(self) -> None:
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be positive, got {self.grid_w}x{self.grid_h}")
        if self.tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {self.tile_size}")
        if self.steps_per_second <= 0:
            raise ValueError(f"steps_per_second must be positive, got {self.steps_per_second}")
        if self.max_steps_per_frame is not None and self.max_steps_per_frame < 1:
            raise ValueError(f"max_steps_per_frame must be >= 1 or None, got {self.max_steps_per_frame}")
        if self.snake_move_every < 1:
            raise ValueError(f"snake_move_every must be >= 1, got {self.snake_move_every}")
        if not 1 <= self.start_len <= self.grid_w // 2:
            raise ValueError(f"start_len must fit in half the grid width, got {self.start_len}")
        if self.stats_every < 1:
            raise ValueError(f"stats_every must be >= 1, got {self.stats_every}")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
