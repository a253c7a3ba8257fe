"""
arcade_pong.env
===============
Gymnasium-style wrapper around one frame of the game, for driving the
simulation without a window or a wall clock.

Each ``step`` runs exactly what the frame loop runs (input → physics → AI)
with the action standing in for the keyboard:

* ``0`` – no key pressed
* ``1`` – one UP key press
* ``2`` – one DOWN key press

Observation (int32): ``[player_y, ai_y, ball_x, ball_y, ball_vx, ball_vy]``.
Reward is ``+1`` when the player scores and ``-1`` when the AI scores.
"""

from __future__ import annotations

import gymnasium as gym
import numpy as np
from gymnasium.spaces import Box, Discrete

from arcade_pong import render as render_backends
from arcade_pong.ai import SeededRandom, update_ai
from arcade_pong.audio import NullAudio
from arcade_pong.constants import *
from arcade_pong.input import DOWN, UP, handle_input
from arcade_pong.physics import Event, step_ball
from arcade_pong.state import GameState

_ACTIONS = {0: (), 1: (UP,), 2: (DOWN,)}


class PongEnv(gym.Env):
    metadata = {
        "render_modes": ["none", "rgb_array"],
        "render_fps": FPS,
    }

    def __init__(self, cfg: dict | None = None):
        super().__init__()
        cfg = cfg or {}

        self.render_mode = cfg.get("render_mode", "none")
        if self.render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode '{self.render_mode}'")
        self.points_to_win = int(cfg.get("points_to_win", 11))
        self.max_steps = int(cfg.get("max_steps", 10_000))

        self.action_space = Discrete(3)
        self.observation_space = Box(
            low=np.array([0, 0, 0, -HEIGHT, -WIDTH, -HEIGHT], dtype=np.int32),
            high=np.array(
                [HEIGHT - PADDLE_HEIGHT, HEIGHT - PADDLE_HEIGHT, WIDTH, 2 * HEIGHT, WIDTH, HEIGHT],
                dtype=np.int32,
            ),
            dtype=np.int32,
        )

        self.renderer = render_backends.make(self.render_mode, cfg)
        self.audio = NullAudio()

        # filled by reset()
        self.state: GameState | None = None
        self.rng: SeededRandom | None = None
        self.steps = 0

    # ----------------------------------------------------------------------
    # observation & info helpers
    # ----------------------------------------------------------------------
    def _get_obs(self) -> np.ndarray:
        s = self.state
        return np.array(
            [s.player.y, s.ai.y, s.ball.x, s.ball.y, s.ball.vx, s.ball.vy],
            dtype=np.int32,
        )

    def _get_info(self, events: list[Event] | None = None) -> dict:
        return {
            "player_score": self.state.score.player,
            "ai_score": self.state.score.ai,
            "events": list(events or []),
        }

    # ----------------------------------------------------------------------
    # gym API
    # ----------------------------------------------------------------------
    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        self.state = GameState.initial()
        self.rng = SeededRandom(generator=self.np_random)
        self.steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: int):
        if self.state is None:
            raise RuntimeError("Call reset() before step()")
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r}")

        handle_input(self.state, _ACTIONS[int(action)])
        events = step_ball(self.state, self.audio)
        update_ai(self.state, self.rng)
        self.state.frame += 1
        self.steps += 1

        reward = 0.0
        if Event.PLAYER_SCORED in events:
            reward += 1.0
        if Event.AI_SCORED in events:
            reward -= 1.0

        score = self.state.score
        terminated = max(score.player, score.ai) >= self.points_to_win
        truncated = self.steps >= self.max_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info(events)

    def render(self):
        if self.state is None:
            raise RuntimeError("Call reset() before render()")
        return self.renderer.render(self.state)

    def close(self):
        self.renderer.close()
