from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

import pygame

from arcade_pong.constants import PADDLE_SPEED
from arcade_pong.state import GameState


class InputKind(enum.Enum):
    QUIT = "quit"
    KEY_DOWN = "key_down"
    IGNORED = "ignored"


class Direction(enum.Enum):
    UP = -1
    DOWN = 1


@dataclass(frozen=True)
class InputEvent:
    kind: InputKind
    direction: Direction | None = None


QUIT = InputEvent(InputKind.QUIT)
UP = InputEvent(InputKind.KEY_DOWN, Direction.UP)
DOWN = InputEvent(InputKind.KEY_DOWN, Direction.DOWN)
IGNORED = InputEvent(InputKind.IGNORED)

_KEYS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
}


def from_pygame(event: pygame.event.Event) -> InputEvent:
    """Tag a raw pygame event as quit, key-down(direction) or ignorable."""
    if event.type == pygame.QUIT:
        return QUIT
    if event.type == pygame.KEYDOWN:
        return _KEYS.get(event.key, IGNORED)
    return IGNORED


def handle_input(state: GameState, events: Iterable[InputEvent]) -> bool:
    """
    Apply one frame's batch of events to the player paddle.

    Every key press moves the paddle by ``PADDLE_SPEED`` and is clamped
    immediately, so several presses in one frame stack up to the wall and
    stop there. Returns the quit flag.
    """
    for event in events:
        if event.kind is InputKind.QUIT:
            state.quit = True
        elif event.kind is InputKind.KEY_DOWN and event.direction is not None:
            state.player.move(event.direction.value * PADDLE_SPEED)
    return state.quit


class IdleInput:
    """Input source that never produces events (headless runs)."""

    def poll(self) -> list[InputEvent]:
        return []
