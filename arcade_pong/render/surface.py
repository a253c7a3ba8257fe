"""
arcade_pong.render.surface
==========================
pygame renderers. Both draw the same picture onto a ``pygame.Surface``:

* :class:`WindowRenderer` draws onto the display surface and flips it;
* :class:`ArrayRenderer` draws off-screen and returns an ``(H, W, 3)`` uint8
  array, handy for tests and for recording frames.

The score font is opened lazily. If it cannot be opened (or the text cannot
be rendered) the error is logged and only that frame's score text is
skipped; the next frame tries again.
"""

from __future__ import annotations

import logging

import numpy as np
import pygame
import pygame.surfarray

from arcade_pong.constants import *
from arcade_pong.state import GameState

from .base import Renderer

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Surface ➔ RGB helper (numpy expects rows first, shape (H, W, 3))
# ---------------------------------------------------------------------------
def _rgb(surface: pygame.Surface) -> np.ndarray:
    arr = pygame.surfarray.array3d(surface)      # (W, H, 3)
    return np.transpose(arr, (1, 0, 2))          # (H, W, 3)


class SurfaceRenderer(Renderer):
    show_score_default = True

    def __init__(self, cfg: dict | None = None):
        super().__init__(cfg)
        self.font_path = self.cfg.get("font_path")
        self.font_size = int(self.cfg.get("font_size", SCORE_FONT_SIZE))
        self.show_score = bool(self.cfg.get("show_score", self.show_score_default))
        self._font: pygame.font.Font | None = None
        self._surface = self._make_surface()

    def _make_surface(self) -> pygame.Surface:
        return pygame.Surface((WIDTH, HEIGHT))

    # ----------------------------------------------------------------------
    # drawing
    # ----------------------------------------------------------------------
    def _draw(self, state: GameState) -> None:
        surface = self._surface
        surface.fill(BLACK)

        player, ai, ball = state.player, state.ai, state.ball
        pygame.draw.rect(surface, WHITE, (player.x, player.y, player.width, player.height))
        pygame.draw.rect(surface, WHITE, (ai.x, ai.y, ai.width, ai.height))
        pygame.draw.rect(surface, WHITE, (ball.x, ball.y, ball.size, ball.size))

        if self.show_score:
            self._draw_score(state)

    def _open_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(self.font_path, self.font_size)
        return self._font

    def _draw_score(self, state: GameState) -> None:
        try:
            font = self._open_font()
            text = font.render(state.score.summary(), False, SCORE_COLOUR)
        except (pygame.error, OSError) as e:
            logger.error("Failed to render score text: %s", e)
            return
        self._surface.blit(text, ((WIDTH - text.get_width()) // 2, SCORE_TEXT_TOP))

    def render(self, state: GameState):
        self._draw(state)


class WindowRenderer(SurfaceRenderer):
    """Draws straight onto the window created by ``init_platform``."""

    def _make_surface(self) -> pygame.Surface:
        surface = pygame.display.get_surface()
        if surface is None:
            raise pygame.error("No display surface; call init_platform() first")
        return surface

    def render(self, state: GameState):
        self._draw(state)
        pygame.display.flip()


class ArrayRenderer(SurfaceRenderer):
    show_score_default = False

    def render(self, state: GameState) -> np.ndarray:
        self._draw(state)
        return _rgb(self._surface).copy()
