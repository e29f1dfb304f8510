# main.py
import argparse
import logging
import random

from .config import Config, GridConfig
from .display import Window
from .game import GameState, new_game_state

logger = logging.getLogger(__name__)


def run(state: GameState, window) -> int:
    """Drive the game until the window closes or the snake dies. Returns the final score."""
    window.open()
    try:
        while not state.ended:
            # 1) input: applied every frame, even between ticks. Read before the
            # gated move so a key pressed on a ticking frame steers that tick;
            # events apply in arrival order, the last accepted one wins
            close, directions = window.poll()
            if close:
                logger.info("Window closed, score=%d", state.score)
                break
            for cand in directions:
                state.request_direction(cand)

            # 2) update: movement gated by the pacing interval
            window.begin_frame()
            state.step(window.elapsed())

            # 3) render
            state.draw(window.renderer)
            window.end_frame()
    finally:
        window.close()
    return state.score


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Grid snake.")
    p.add_argument("--seed", type=int, default=None, help="seed for food placement")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config(seed=args.seed)
    if config.seed is not None:
        random.seed(config.seed)

    logger.info("## Snake ##")
    grid = GridConfig()
    state = new_game_state(config, grid)
    score = run(state, Window(grid, config))
    logger.info("Final score: %d", score)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
