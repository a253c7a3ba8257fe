import numpy as np
import pytest

from arcade_pong.constants import *
from arcade_pong.env import PongEnv
from arcade_pong.physics import Event


def test_reset_returns_observation_in_space():
    env = PongEnv()
    obs, info = env.reset(seed=0)
    assert obs.shape == (6,) and obs.dtype == np.int32
    assert env.observation_space.contains(obs)
    assert info == {"player_score": 0, "ai_score": 0, "events": []}


def test_actions_drive_the_player_paddle():
    env = PongEnv()
    obs, _ = env.reset(seed=0)
    y0 = obs[0]

    obs, *_ = env.step(1)
    assert obs[0] == y0 - PADDLE_SPEED
    obs, *_ = env.step(2)
    obs, *_ = env.step(2)
    assert obs[0] == y0 + PADDLE_SPEED
    obs, *_ = env.step(0)
    assert obs[0] == y0 + PADDLE_SPEED


def test_step_before_reset_raises():
    with pytest.raises(RuntimeError):
        PongEnv().step(0)


def test_invalid_action_raises():
    env = PongEnv()
    env.reset(seed=0)
    with pytest.raises(ValueError):
        env.step(3)


def test_same_seed_same_trajectory():
    def rollout(seed):
        env = PongEnv()
        env.reset(seed=seed)
        return [env.step(i % 3)[0].tolist() for i in range(300)]

    assert rollout(11) == rollout(11)


def test_ai_point_gives_negative_reward_and_terminates():
    env = PongEnv({"points_to_win": 1})
    env.reset(seed=0)
    ball = env.state.ball
    ball.x, ball.y, ball.vx, ball.vy = 3, 300, -6, 0

    _, reward, terminated, truncated, info = env.step(0)

    assert reward == -1.0
    assert terminated is True and truncated is False
    assert info["ai_score"] == 1
    assert Event.AI_SCORED in info["events"]


def test_player_point_gives_positive_reward():
    env = PongEnv()
    env.reset(seed=0)
    ball = env.state.ball
    ball.x, ball.y, ball.vx, ball.vy = WIDTH - BALL_SIZE - 2, 100, 6, 0

    _, reward, terminated, _, _ = env.step(0)

    assert reward == 1.0
    assert terminated is False


def test_truncates_after_max_steps():
    env = PongEnv({"max_steps": 3})
    env.reset(seed=0)
    assert [env.step(0)[3] for _ in range(3)] == [False, False, True]


def test_rgb_array_render():
    env = PongEnv({"render_mode": "rgb_array"})
    env.reset(seed=0)
    frame = env.render()
    assert frame.shape == (HEIGHT, WIDTH, 3)
    env.close()


def test_unsupported_render_mode():
    with pytest.raises(ValueError):
        PongEnv({"render_mode": "human"})
