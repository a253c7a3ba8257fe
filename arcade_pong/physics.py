"""
arcade_pong.physics
===================
Ball integration and collision resolution.

One call to :func:`step_ball` advances the ball by exactly one frame. The
checks run in a fixed order and none of them returns early, so a single
frame may report several events (e.g. a wall bounce and a score).

Known approximations that are part of the game's feel:

* plain Euler step with no sub-stepping, so a fast ball can tunnel through
  a paddle;
* the ball is never pushed back inside the arena after a wall bounce, it may
  sit a few pixels outside for one frame;
* the paddle test only looks at the ball's top edge (``ball.y``), not the
  full ball rectangle;
* a score resets ``vx`` to the base speed but keeps ``vy`` as it was.
"""

from __future__ import annotations

import enum
import logging

from arcade_pong.audio import Audio, NullAudio
from arcade_pong.constants import *
from arcade_pong.state import Ball, GameState, Paddle

logger = logging.getLogger(__name__)


class Event(enum.Enum):
    WALL_BOUNCE = "wall_bounce"
    PADDLE_HIT = "paddle_hit"
    PLAYER_SCORED = "player_scored"
    AI_SCORED = "ai_scored"


HIT_EVENTS = frozenset({Event.WALL_BOUNCE, Event.PADDLE_HIT})
POINT_EVENTS = frozenset({Event.PLAYER_SCORED, Event.AI_SCORED})


def integrate(ball: Ball) -> None:
    ball.x += ball.vx
    ball.y += ball.vy


def _touches(ball: Ball, paddle: Paddle) -> bool:
    return paddle.y <= ball.y <= paddle.y + paddle.height


def step_ball(state: GameState, audio: Audio | None = None) -> list[Event]:
    """Advance the ball one frame and return the events it produced."""
    audio = audio or NullAudio()
    ball, score = state.ball, state.score
    events: list[Event] = []

    def emit(event: Event) -> None:
        events.append(event)
        if event in POINT_EVENTS:
            audio.play_point()
        else:
            audio.play_hit()

    # 1. Euler step
    integrate(ball)

    # 2. Top / bottom walls
    if ball.y < 0 or ball.y + ball.size > HEIGHT:
        ball.vy = -ball.vy
        emit(Event.WALL_BOUNCE)

    # 3. Left / right exits
    if ball.x < 0:
        emit(Event.AI_SCORED)
        score.ai += 1
        ball.reset_to_center()
        ball.vx = BALL_SPEED
    elif ball.x + ball.size > WIDTH:
        emit(Event.PLAYER_SCORED)
        score.player += 1
        ball.reset_to_center()
        ball.vx = -BALL_SPEED

    # 4. Player paddle (left)
    if ball.x < state.player.width and _touches(ball, state.player):
        ball.vx = -ball.vx
        emit(Event.PADDLE_HIT)

    # 5. AI paddle (right)
    if ball.x + ball.size > WIDTH - state.ai.width and _touches(ball, state.ai):
        ball.vx = -ball.vx
        emit(Event.PADDLE_HIT)

    if POINT_EVENTS.intersection(events):
        logger.info("Point scored: %s", score.summary())
    return events
