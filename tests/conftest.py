import os

# No real window or sound card in CI
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from arcade_pong.render.base import Renderer
from arcade_pong.state import GameState


class FixedRandom:
    """``RandomSource`` stub: always returns *value* and remembers the ranges asked for."""

    def __init__(self, value: int = 4):
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


class FakeClock:
    """
    Each ``ticks()`` call advances time by ``work_ms`` so a frame appears to
    take exactly that long; ``sleep`` only records and advances time.
    """

    def __init__(self, work_ms: int = 0):
        self.now = 0
        self.work_ms = work_ms
        self.sleeps: list[int] = []

    def ticks(self) -> int:
        t = self.now
        self.now += self.work_ms
        return t

    def sleep(self, ms: int) -> None:
        self.sleeps.append(ms)
        self.now += ms


class RecordingAudio:
    def __init__(self):
        self.hits = 0
        self.points = 0

    def play_hit(self):
        self.hits += 1

    def play_point(self):
        self.points += 1


class RecordingRenderer(Renderer):
    """Keeps a (ball_x, ball_y, player_y, ai_y) snapshot of every rendered frame."""

    def __init__(self, cfg=None):
        super().__init__(cfg)
        self.frames = []

    def render(self, state):
        self.frames.append((state.ball.x, state.ball.y, state.player.y, state.ai.y))


class ScriptedInput:
    """Hands out one pre-recorded batch per frame, then nothing."""

    def __init__(self, batches=None):
        self.batches = list(batches or [])

    def poll(self):
        return self.batches.pop(0) if self.batches else []


@pytest.fixture
def state():
    """Fresh startup state per test."""
    return GameState.initial()


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scripted_input():
    """Factory: ``scripted_input([[UP], [], [QUIT]])``."""
    return ScriptedInput
