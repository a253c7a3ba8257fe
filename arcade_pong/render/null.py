from .base import Renderer


class NullRenderer(Renderer):
    """Draws nothing; used for headless simulation."""

    def render(self, state):
        return None
