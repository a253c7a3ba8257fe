"""
arcade_pong.platform
====================
Startup / shutdown of the pygame subsystems (display, font, mixer) and the
per-frame event source.

Any failure during :func:`init_platform` is fatal and surfaces as
:class:`PlatformInitError` before the frame loop starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pygame

from arcade_pong.audio import Audio, NullAudio, PygameAudio
from arcade_pong.constants import *
from arcade_pong.input import InputEvent, from_pygame
from arcade_pong.paths import get_asset

logger = logging.getLogger(__name__)


class PlatformInitError(RuntimeError):
    """A subsystem or asset needed before the first frame is unavailable."""


class PygameInput:
    def poll(self) -> list[InputEvent]:
        return [from_pygame(e) for e in pygame.event.get()]


@dataclass
class Platform:
    audio: Audio = field(default_factory=NullAudio)
    input: PygameInput = field(default_factory=PygameInput)
    closed: bool = False

    def shutdown(self) -> None:
        if self.closed:
            return
        self.closed = True
        if pygame.mixer.get_init():
            pygame.mixer.quit()
        pygame.font.quit()
        pygame.display.quit()
        pygame.quit()
        logger.debug("Platform shut down")


def init_platform(cfg: dict | None = None) -> Platform:
    cfg = cfg or {}
    platform = Platform()
    try:
        pygame.display.init()
        pygame.font.init()

        if cfg.get("audio", True):
            pygame.mixer.init(
                frequency=MIXER_FREQUENCY, size=-16,
                channels=MIXER_CHANNELS, buffer=MIXER_BUFFER,
            )

        pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        if cfg.get("audio", True):
            platform.audio = PygameAudio.load(
                get_asset(HIT_SOUND, cfg), get_asset(POINT_SOUND, cfg)
            )
    except (pygame.error, FileNotFoundError) as e:
        platform.shutdown()
        raise PlatformInitError(str(e)) from e

    logger.info("Platform ready (%dx%d, audio=%s)", WIDTH, HEIGHT, bool(cfg.get("audio", True)))
    return platform
