from __future__ import annotations

import json
import pathlib
from typing import Any

from arcade_pong.constants import FPS

# -----------------------------------------------------------------------------
# Defaults and built-in profiles
# -----------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    "render_mode": "human",
    "fps": FPS,
    "seed": None,
    "audio": True,
    "assets_dir": None,
    "font_path": None,
    "max_frames": None,
}

BUILT_IN_PROFILES: dict[str, dict[str, Any]] = {
    "classic": {},
    "silent": {"audio": False},
    "headless": {"render_mode": "none", "audio": False, "max_frames": 3600},
}


def load_profile(path_or_key: str | None) -> dict[str, Any]:
    """Return a profile dict from built-ins or an external JSON file."""
    if path_or_key is None:
        return BUILT_IN_PROFILES["classic"]

    if path_or_key in BUILT_IN_PROFILES:
        return BUILT_IN_PROFILES[path_or_key]

    # external JSON
    p = pathlib.Path(path_or_key).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Profile file not found: {p}")
    data = json.loads(p.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Profile {p} must contain a JSON object")
    return data


def make_config(profile: dict[str, Any] | None = None, **overrides: Any) -> dict[str, Any]:
    """
    DEFAULT_CONFIG ← profile ← overrides. ``None`` overrides are ignored so
    unset CLI flags never clobber a profile value.
    """
    cfg = dict(DEFAULT_CONFIG)
    cfg.update(profile or {})
    cfg.update({k: v for k, v in overrides.items() if v is not None})
    return cfg


def validate_config(cfg: dict[str, Any]) -> dict[str, Any]:
    """Reject values the frame loop or the AI seed cannot work with."""
    if int(cfg["fps"]) <= 0:
        raise ValueError(f"fps must be positive, got {cfg['fps']}")
    if cfg["seed"] is not None and int(cfg["seed"]) < 0:
        raise ValueError(f"seed must be >= 0, got {cfg['seed']}")
    if cfg["max_frames"] is not None and int(cfg["max_frames"]) < 0:
        raise ValueError(f"max_frames must be >= 0, got {cfg['max_frames']}")
    return cfg
