# game.py
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import logging
import random

from .config import (
    DARK_BLUE, TEXT,
    UP, DOWN, LEFT, RIGHT,
    INITIAL_BODY, INITIAL_DIRECTION,
    CFG, Config, GridConfig,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ---------- Helpers ----------
def is_opposite(a: Position, b: Position) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def pacing_interval(score: int, config: Config = CFG) -> float:
    """Seconds between moves: shrinks with score, floored at config.min_interval."""
    return max(config.base_interval - score * config.interval_step, config.min_interval)

# ---------- Snake ----------
@dataclass
class Snake:
    body: List[Position] = field(default_factory=lambda: list(INITIAL_BODY))  # head at index 0
    direction: Position = INITIAL_DIRECTION

    @property
    def head(self) -> Position:
        return self.body[0]

    def advance(self) -> None:
        """Drop the tail and push a new head one cell along direction. No wraparound."""
        hx, hy = self.body[0]
        dx, dy = self.direction
        self.body.pop()
        self.body.insert(0, (hx + dx, hy + dy))

    def grow(self) -> None:
        # The copy sits on the tail until the next advance() pulls them apart
        self.body.append(self.body[-1])

    def set_direction(self, candidate: Position) -> bool:
        """Accept a unit direction unless it is a straight reversal. Returns True if accepted."""
        if candidate not in DIRECTIONS or is_opposite(candidate, self.direction):
            return False
        self.direction = candidate
        return True

    def draw(self, renderer, cell_size: int) -> None:
        for x, y in self.body:
            renderer.rounded_rect(x * cell_size, y * cell_size, cell_size, cell_size, DARK_BLUE, 0.5)

# ---------- Food ----------
@dataclass
class Food:
    position: Position

    @classmethod
    def spawn(cls, grid_size: int) -> "Food":
        food = cls((0, 0))
        food.resample(grid_size)
        return food

    def resample(self, grid_size: int) -> None:
        # May land under the snake; nothing excludes body cells
        self.position = (random.randrange(grid_size), random.randrange(grid_size))

    def draw(self, renderer, cell_size: int) -> None:
        x, y = self.position
        renderer.rect(x * cell_size, y * cell_size, cell_size, cell_size, DARK_BLUE)

# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    food: Food
    grid: GridConfig = field(default_factory=GridConfig)
    config: Config = field(default_factory=lambda: CFG)
    score: int = 0
    last_move: float = 0.0          # seconds, time of the last admitted tick
    ended: bool = False
    end_reason: Optional[str] = None

    def pacing_interval(self) -> float:
        return pacing_interval(self.score, self.config)

    def should_move(self, now: float) -> bool:
        """
        Pacing gate. Admits at most one tick per call; the reference time snaps
        to `now` so any overshoot is dropped rather than caught up.
        """
        if now - self.last_move >= self.pacing_interval():
            self.last_move = now
            return True
        return False

    def step(self, now: float) -> bool:
        """Tick if the gate allows it. Returns True if the snake moved."""
        if self.ended or not self.should_move(now):
            return False
        self.tick()
        return True

    def tick(self) -> None:
        self.snake.advance()
        self.check_food()
        # Both collision checks run every tick, even after one has fired
        self.check_boundary()
        self.check_body()

    def check_food(self) -> bool:
        if self.snake.head != self.food.position:
            return False
        self.food.resample(self.grid.cell_count)
        self.snake.grow()
        self.score += 1
        logger.debug("Food eaten, score=%d, next food at %s", self.score, self.food.position)
        return True

    def check_boundary(self) -> bool:
        x, y = self.snake.head
        n = self.grid.cell_count
        if 0 <= x < n and 0 <= y < n:
            return False
        self._end("wall")
        return True

    def check_body(self) -> bool:
        head = self.snake.head
        hit = False
        for segment in self.snake.body[1:]:
            if segment == head:
                hit = True
        if hit:
            self._end("body")
        return hit

    def request_direction(self, candidate: Position) -> bool:
        accepted = self.snake.set_direction(candidate)
        if accepted:
            logger.debug("Direction -> %s", candidate)
        return accepted

    def draw(self, renderer) -> None:
        size = self.grid.cell_size
        self.food.draw(renderer, size)
        self.snake.draw(renderer, size)
        renderer.text(f"Score: {self.score}", 10, 10, 20, TEXT)

    def _end(self, reason: str) -> None:
        if not self.ended:
            self.ended = True
            self.end_reason = reason
            logger.info("Game over (%s), score=%d", reason, self.score)

def new_game_state(config: Config = CFG, grid: Optional[GridConfig] = None) -> GameState:
    grid = grid or GridConfig()
    return GameState(
        snake=Snake(),
        food=Food.spawn(grid.cell_count),
        grid=grid,
        config=config,
    )
