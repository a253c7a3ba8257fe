"""
arcade_pong.scheduler
=====================
Fixed-rate frame loop.

Each iteration is strictly sequential::

    poll input → input handler → physics → AI → render → sleep

The loop sleeps only for what is left of the frame budget. A frame that
runs long is simply long: there is no frame skipping and no catch-up.
The quit flag is checked once, at the top of each iteration.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Protocol

from arcade_pong.ai import RandomSource, update_ai
from arcade_pong.audio import Audio
from arcade_pong.constants import FPS
from arcade_pong.input import InputEvent, handle_input
from arcade_pong.physics import HIT_EVENTS, POINT_EVENTS, Event, step_ball
from arcade_pong.render.base import Renderer
from arcade_pong.state import GameState
from arcade_pong.utils.timing import Clock, SystemClock

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    def poll(self) -> Iterable[InputEvent]: ...


@dataclass
class FrameStats:
    frames: int = 0
    overruns: int = 0
    hits: int = 0
    points: int = 0

    def record(self, events: list[Event], elapsed_ms: int, budget_ms: int) -> None:
        self.frames += 1
        self.hits += sum(e in HIT_EVENTS for e in events)
        self.points += sum(e in POINT_EVENTS for e in events)
        if elapsed_ms >= budget_ms:
            self.overruns += 1


class FrameScheduler:
    def __init__(
        self,
        state: GameState,
        input_source: InputSource,
        audio: Audio,
        renderer: Renderer,
        rng: RandomSource,
        clock: Clock | None = None,
        fps: int = FPS,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.state = state
        self.input_source = input_source
        self.audio = audio
        self.renderer = renderer
        self.rng = rng
        self.clock = clock or SystemClock()
        self.frame_budget_ms = 1000 // fps
        self.stats = FrameStats()

    # ----------------------------------------------------------------------
    # one frame
    # ----------------------------------------------------------------------
    def run_frame(self) -> list[Event]:
        start = self.clock.ticks()

        handle_input(self.state, self.input_source.poll())
        events = step_ball(self.state, self.audio)
        update_ai(self.state, self.rng)
        self.renderer.render(self.state)
        self.state.frame += 1

        elapsed = self.clock.ticks() - start
        self.stats.record(events, elapsed, self.frame_budget_ms)
        if self.frame_budget_ms > elapsed:
            self.clock.sleep(self.frame_budget_ms - elapsed)
        else:
            logger.debug("Frame %d ran long (%d ms)", self.state.frame, elapsed)
        return events

    # ----------------------------------------------------------------------
    # main loop
    # ----------------------------------------------------------------------
    def run(self, max_frames: int | None = None) -> GameState:
        while not self.state.quit:
            if max_frames is not None and self.stats.frames >= max_frames:
                break
            self.run_frame()

        logger.debug(
            "Loop finished after %d frames (%d over budget, %d hits, %d points)",
            self.stats.frames, self.stats.overruns, self.stats.hits, self.stats.points,
        )
        return self.state
