# arcade_pong/paths.py  (pure path helpers, no pygame imports here)
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from arcade_pong.constants import HIT_SOUND, POINT_SOUND

BASE_ASSETS_DIR = (Path(__file__).resolve().parent / "assets").expanduser()

SOUND_ASSETS = (HIT_SOUND, POINT_SOUND)


def get_assets_dir(cfg: Dict[str, Any] | None = None) -> Path:
    """``cfg["assets_dir"]`` if set, else the bundled <repo>/arcade_pong/assets."""
    override = (cfg or {}).get("assets_dir")
    if override:
        return Path(override).expanduser()
    return BASE_ASSETS_DIR


def get_asset(name: str, cfg: Dict[str, Any] | None = None) -> Path:
    path = get_assets_dir(cfg) / name
    if not path.is_file():
        raise FileNotFoundError(f"Asset not found: {path}")
    return path


def get_font_path(cfg: Dict[str, Any] | None = None) -> str | None:
    """
    Font used for the score text, or ``None`` for pygame's bundled default.
    Relative names are looked up in the assets directory.
    """
    font = (cfg or {}).get("font_path")
    if not font:
        return None
    p = Path(font).expanduser()
    if not p.is_absolute():
        p = get_assets_dir(cfg) / p
    return str(p)
