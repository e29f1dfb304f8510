# display.py
from typing import Dict, List, Optional, Tuple
import logging

import pygame # type: ignore

from .config import BG, UP, DOWN, LEFT, RIGHT, CFG, Config, GridConfig

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

def read_direction(event) -> Optional[Tuple[int, int]]:
    """Map an arrow-key press to a direction; anything else gives None."""
    if event.type != pygame.KEYDOWN:
        return None
    return KEY_DIRECTIONS.get(event.key)


class Renderer:
    """Draw sink over a pygame surface. Coordinates are in pixels."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[int, pygame.font.Font] = {}

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h))

    def rounded_rect(self, x: int, y: int, w: int, h: int, color: Color, roundness: float) -> None:
        # roundness 1.0 turns the shorter side into a full semicircle
        radius = int(roundness * min(w, h) / 2)
        pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h), border_radius=radius)

    def text(self, message: str, x: int, y: int, size: int, color: Color) -> None:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.SysFont(None, size)
            self._fonts[size] = font
        self.surface.blit(font.render(message, True, color), (x, y))


class Window:
    """The pygame window plus clock and event queue the game loop runs against."""

    def __init__(self, grid: GridConfig, config: Config = CFG):
        self.grid = grid
        self.config = config
        self.renderer: Optional[Renderer] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._start_ms = 0

    def open(self) -> None:
        pygame.init()
        size = self.grid.pixel_size
        screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption(self.config.title)
        self.renderer = Renderer(screen)
        self._clock = pygame.time.Clock()
        self._start_ms = pygame.time.get_ticks()
        logger.debug("Opened %dx%d window", size, size)

    def elapsed(self) -> float:
        """Seconds since open()."""
        return (pygame.time.get_ticks() - self._start_ms) / 1000.0

    def poll(self) -> Tuple[bool, List[Tuple[int, int]]]:
        """Drain the event queue. Returns (close requested, arrow directions in order)."""
        close = False
        directions = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                close = True
                continue
            cand = read_direction(event)
            if cand is not None:
                directions.append(cand)
        return close, directions

    def begin_frame(self) -> None:
        self.renderer.clear(BG)

    def end_frame(self) -> None:
        pygame.display.flip()
        self._clock.tick(self.config.fps)

    def close(self) -> None:
        pygame.quit()
