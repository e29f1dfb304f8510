import random

from snake import main as snake_main
from snake.config import UP, LEFT
from snake.game import Food
from snake.main import parse_args, run


class FakeWindow:
    """Scripted stand-in for the pygame window: each poll pops one frame of input."""

    def __init__(self, renderer, frames=(), dt=0.25):
        self.renderer = renderer
        self.frames = list(frames)
        self.dt = dt
        self.now = 0.0
        self.opened = False
        self.closed = False
        self.frame_count = 0

    def open(self):
        self.opened = True

    def poll(self):
        if self.frames:
            return self.frames.pop(0)
        return False, []

    def elapsed(self):
        self.now += self.dt
        return self.now

    def begin_frame(self):
        self.renderer.clear((0, 0, 0))

    def end_frame(self):
        self.frame_count += 1

    def close(self):
        self.closed = True


def test_run_until_wall(renderer, make_state):
    state = make_state([(6, 9), (5, 9), (4, 9)])
    window = FakeWindow(renderer)
    score = run(state, window)
    assert score == 0
    assert state.ended and state.end_reason == "wall"
    assert state.snake.head == (25, 9)
    assert window.opened and window.closed
    # one tick per frame at dt=0.25: 6 -> 25 takes 19 moves
    assert window.frame_count == 19


def test_run_applies_input(renderer, make_state):
    state = make_state([(6, 9), (5, 9), (4, 9)])
    window = FakeWindow(renderer, frames=[(False, [LEFT, UP])])
    run(state, window)
    assert state.snake.head == (6, -1)
    assert state.end_reason == "wall"


def test_input_steers_the_tick_in_the_same_frame(renderer, make_state):
    state = make_state([(6, 9), (5, 9), (4, 9)])
    window = FakeWindow(renderer, frames=[(False, [UP]), (True, [])])
    run(state, window)
    # one ticking frame: the key read on that frame already applied
    assert state.snake.body == [(6, 8), (6, 9), (5, 9)]


def test_run_stops_on_close(renderer, make_state):
    state = make_state([(6, 9), (5, 9), (4, 9)])
    window = FakeWindow(renderer, frames=[(True, [])])
    assert run(state, window) == 0
    assert not state.ended
    assert state.snake.head == (6, 9)
    assert window.closed
    assert window.frame_count == 0


def test_run_scores_along_the_way(monkeypatch, renderer, make_state):
    state = make_state([(6, 9), (5, 9), (4, 9)], food=(8, 9))
    monkeypatch.setattr(random, "randrange", lambda n: 0)
    assert run(state, FakeWindow(renderer)) == 1
    assert len(state.snake.body) == 4


def test_run_moves_only_on_gate(renderer, make_state):
    state = make_state([(6, 9), (5, 9), (4, 9)])
    window = FakeWindow(renderer, frames=[(False, [])] * 3 + [(True, [])], dt=0.1)
    run(state, window)
    # elapsed 0.1, 0.2, 0.3: only 0.2 clears the 0.2s interval
    assert state.snake.head == (7, 9)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.seed is None
    assert args.log_level == "INFO"


def test_main_wires_window(monkeypatch):
    made = {}

    def fake_run(state, window):
        made["state"] = state
        made["window"] = window
        state.score = 3
        return state.score

    monkeypatch.setattr(snake_main, "run", fake_run)
    assert snake_main.main(["--seed", "5", "--log-level", "DEBUG"]) == 0
    assert made["state"].config.seed == 5
    assert made["window"].grid.pixel_size == 750
    assert isinstance(made["state"].food, Food)
