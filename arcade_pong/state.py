"""
arcade_pong.state
=================
Plain mutable game state: two paddles, one ball and the score.

Everything is created once by :meth:`GameState.initial` and mutated in
place every frame. Components receive the state explicitly; nothing here
knows about pygame.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from arcade_pong.constants import *


def ball_center() -> tuple[int, int]:
    """Top-left corner that centres the ball in the arena."""
    return (WIDTH - BALL_SIZE) // 2, (HEIGHT - BALL_SIZE) // 2


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@dataclass
class Paddle:
    x: int
    y: int = (HEIGHT - PADDLE_HEIGHT) // 2
    width: int = PADDLE_WIDTH
    height: int = PADDLE_HEIGHT

    @property
    def center(self) -> int:
        return self.y + self.height // 2

    @property
    def max_y(self) -> int:
        return HEIGHT - self.height

    def clamp(self) -> int:
        self.y = int(np.clip(self.y, 0, self.max_y))
        return self.y

    def move(self, dy: int) -> int:
        self.y += dy
        return self.clamp()


@dataclass
class Ball:
    x: int = ball_center()[0]
    y: int = ball_center()[1]
    vx: int = BALL_SPEED_X_INITIAL
    vy: int = BALL_SPEED_Y_INITIAL
    size: int = BALL_SIZE

    def reset_to_center(self) -> None:
        # velocity is left to the caller; vy survives a reset
        self.x, self.y = ball_center()


@dataclass
class Score:
    player: int = 0
    ai: int = 0

    def summary(self) -> str:
        return f"You: {self.player} AI: {self.ai}"


@dataclass
class GameState:
    player: Paddle = field(default_factory=lambda: Paddle(x=PADDLE_WIDTH))
    ai: Paddle = field(default_factory=lambda: Paddle(x=WIDTH - 2 * PADDLE_WIDTH))
    ball: Ball = field(default_factory=Ball)
    score: Score = field(default_factory=Score)
    quit: bool = False
    frame: int = 0

    @classmethod
    def initial(cls) -> "GameState":
        return cls()
