# snakeloop/core/grid.py  (map storage + food placement, no pygame)
from __future__ import annotations
from typing import Optional, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from .snake import GridSnake

Cell = Tuple[int, int]


class GridMap:
    def __init__(self, width: int = 32, height: int = 16, tile_size: int = 10, seed: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"map must be at least 1x1, got {width}x{height}")
        if tile_size <= 0:
            raise ValueError(f"tile_size must be positive, got {tile_size}")
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.rng = np.random.default_rng(seed)
        self.food: Optional[Cell] = None
        self.snake: Optional["GridSnake"] = None

    def seed(self, seed: Optional[int]) -> None:
        self.rng = np.random.default_rng(seed)

    def get_dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def get_tile_size(self) -> int:
        return self.tile_size

    def place_snake(self, snake: "GridSnake") -> None:
        for cell in snake.body:
            if not self.is_inside(cell):
                raise ValueError(f"snake cell {cell} lies outside the {self.width}x{self.height} map")
        self.snake = snake

    def is_inside(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def consume_food(self, cell: Cell) -> bool:
        if self.food != cell:
            return False
        self.food = None
        return True

    def free_cells(self) -> np.ndarray:
        """(N, 2) array of (x, y) cells not covered by the snake."""
        occ = np.zeros((self.height, self.width), dtype=bool)
        if self.snake is not None:
            for x, y in self.snake.body:
                occ[y, x] = True
        ys, xs = np.nonzero(~occ)
        return np.stack([xs, ys], axis=1)

    def refresh_food(self) -> None:
        if self.food is not None:
            return
        free = self.free_cells()
        if len(free) == 0:
            return  # board full
        x, y = free[self.rng.integers(len(free))]
        self.food = (int(x), int(y))
