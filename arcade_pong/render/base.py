from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

# Optional static typing without runtime import
if TYPE_CHECKING:
    from arcade_pong.state import GameState  # only evaluated by type-checkers


class Renderer(ABC):
    def __init__(self, cfg: dict | None = None):
        self.cfg = cfg or {}

    @abstractmethod
    def render(self, state: "GameState"):
        """Draw one frame from *state*. Must not mutate the state."""

    def close(self) -> None:
        pass
