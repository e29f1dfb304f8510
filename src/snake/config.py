# config.py
from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
CELL_SIZE = 30
CELL_COUNT = 25

# ----- Colors -----
BG        = (173, 216, 230)   # light blue background
DARK_BLUE = (43, 24, 51)      # snake + food
TEXT      = (80, 80, 80)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

# ----- Starting snake -----
INITIAL_BODY = [(6, 9), (5, 9), (4, 9)]
INITIAL_DIRECTION = RIGHT


@dataclass(frozen=True)
class GridConfig:
    """Square grid of cell_count x cell_count cells, cell_size pixels each."""
    cell_size: int = CELL_SIZE
    cell_count: int = CELL_COUNT

    def __post_init__(self):
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be >= 1, got {self.cell_size}")
        if self.cell_count < 1:
            raise ValueError(f"cell_count must be >= 1, got {self.cell_count}")

    @property
    def pixel_size(self) -> int:
        return self.cell_size * self.cell_count


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    seed: Optional[int] = None
    base_interval: float = 0.2     # seconds between moves at score 0
    interval_step: float = 0.01    # shaved off per point
    min_interval: float = 0.05
    fps: int = 60
    title: str = "Snake"

    def __post_init__(self):
        if self.min_interval <= 0:
            raise ValueError(f"min_interval must be positive, got {self.min_interval}")
        if self.base_interval < self.min_interval:
            raise ValueError(
                f"base_interval ({self.base_interval}) is below min_interval ({self.min_interval})"
            )
        if self.fps < 1:
            raise ValueError(f"fps must be >= 1, got {self.fps}")


CFG = Config()
