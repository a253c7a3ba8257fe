from __future__ import annotations

from typing import Protocol

import numpy as np
from gymnasium.utils import seeding

from arcade_pong.constants import AI_STEP_MAX, AI_STEP_MIN
from arcade_pong.state import GameState


class RandomSource(Protocol):
    def randint(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high]`` (both ends inclusive)."""


class SeededRandom:
    """``RandomSource`` backed by gymnasium's seeded numpy generator."""

    def __init__(self, seed: int | None = None, generator: np.random.Generator | None = None):
        if generator is not None:
            # already seeded elsewhere, e.g. by gym.Env.reset(seed=...)
            self.np_random, self.seed = generator, seed
        else:
            self.np_random, self.seed = seeding.np_random(seed)

    def randint(self, low: int, high: int) -> int:
        return int(self.np_random.integers(low, high + 1))


def update_ai(state: GameState, rng: RandomSource) -> int:
    """
    Steer the AI paddle one frame towards the ball.

    The step is redrawn every frame from ``[AI_STEP_MIN, AI_STEP_MAX]``, which
    makes the tracking jittery and beatable. Returns the requested
    displacement (0 when the ball is level with the paddle centre).
    """
    paddle = state.ai
    ball_y = state.ball.y

    if ball_y > paddle.center:
        dy = rng.randint(AI_STEP_MIN, AI_STEP_MAX)
    elif ball_y < paddle.center:
        dy = -rng.randint(AI_STEP_MIN, AI_STEP_MAX)
    else:
        return 0

    paddle.move(dy)
    return dy
