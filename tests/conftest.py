import pytest

from snake.config import Config, GridConfig
from snake.game import Food, GameState, Snake


class FakeRenderer:
    def __init__(self):
        self.calls = []

    def clear(self, color):
        self.calls.append(("clear", color))

    def rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def rounded_rect(self, x, y, w, h, color, roundness):
        self.calls.append(("rounded_rect", x, y, w, h, color, roundness))

    def text(self, message, x, y, size, color):
        self.calls.append(("text", message, x, y, size, color))


@pytest.fixture
def renderer():
    return FakeRenderer()


@pytest.fixture
def make_state():
    """Build a state with an explicit body/direction and food parked out of the way."""
    def _make(body, direction=(1, 0), food=(20, 20), score=0):
        return GameState(
            snake=Snake(body=list(body), direction=direction),
            food=Food(food),
            grid=GridConfig(),
            config=Config(),
            score=score,
        )
    return _make
