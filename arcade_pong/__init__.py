"""Single-screen Pong: player vs. a jittery reactive AI at a fixed 60 FPS."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

__version__ = "0.1.0"
