from __future__ import annotations
from importlib import import_module

# Bring the ABC into this namespace for type hints
from .base import Renderer

# Map render-mode → “module:Class” string
_MODES = {
    "human": "arcade_pong.render.surface:WindowRenderer",
    "rgb_array": "arcade_pong.render.surface:ArrayRenderer",
    "none": "arcade_pong.render.null:NullRenderer",
}


def make(mode: str, cfg: dict | None = None) -> Renderer:
    """
    Factory: returns a renderer for the requested render mode.
    """
    try:
        module_path, cls_name = _MODES[mode].split(":")
    except KeyError:
        raise ValueError(f"Unknown render mode '{mode}'") from None
    cls = getattr(import_module(module_path), cls_name)
    return cls(cfg or {})
