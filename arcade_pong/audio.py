from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import pygame

logger = logging.getLogger(__name__)


class Audio(Protocol):
    """Fire-and-forget sound cues triggered by the physics step."""

    def play_hit(self) -> None: ...

    def play_point(self) -> None: ...


class NullAudio:
    """Silent stand-in used for headless runs and ``--no-audio``."""

    def play_hit(self) -> None:
        pass

    def play_point(self) -> None:
        pass


class PygameAudio:
    def __init__(self, hit: pygame.mixer.Sound, point: pygame.mixer.Sound):
        self.hit = hit
        self.point = point

    @classmethod
    def load(cls, hit_path: Path, point_path: Path) -> "PygameAudio":
        # pygame.error propagates: a sound that cannot be decoded is fatal at startup
        return cls(pygame.mixer.Sound(str(hit_path)), pygame.mixer.Sound(str(point_path)))

    def _play(self, sound: pygame.mixer.Sound, name: str) -> None:
        # Sound.play() returns None when every channel is busy; the cue is dropped
        if sound.play() is None:
            logger.debug("No free mixer channel for %s cue", name)

    def play_hit(self) -> None:
        self._play(self.hit, "hit")

    def play_point(self) -> None:
        self._play(self.point, "point")
