#!/usr/bin/env python3
"""Play Pong against the computer – arrow keys move your (left) paddle.

Examples
--------
```
python play_pong.py                       # windowed game, 60 FPS
python play_pong.py --profile silent      # no audio device needed
python play_pong.py --headless --max-frames 600 --seed 7
python play_pong.py --profile my_profile.json --fps 30
```
A profile is either a built-in key (``classic``, ``silent``, ``headless``) or
a JSON object whose keys override the defaults in ``arcade_pong.config``.
"""
from __future__ import annotations

import argparse
import logging
import sys

from arcade_pong import render
from arcade_pong.ai import SeededRandom
from arcade_pong.audio import NullAudio
from arcade_pong.config import BUILT_IN_PROFILES, load_profile, make_config, validate_config
from arcade_pong.input import IdleInput
from arcade_pong.paths import get_font_path
from arcade_pong.platform import PlatformInitError, init_platform
from arcade_pong.scheduler import FrameScheduler
from arcade_pong.state import GameState
from arcade_pong.utils.timing import timing

logger = logging.getLogger("play_pong")


def build_parser() -> argparse.ArgumentParser:
    argp = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    argp.add_argument("--profile",
                      help=f"Built-in profile ({', '.join(BUILT_IN_PROFILES)}) or JSON file")
    argp.add_argument("--fps", type=int, default=None, help="Target frame rate")
    argp.add_argument("--seed", type=int, default=None, help="Seed for the AI's step sizes")
    argp.add_argument("--headless", action="store_true",
                      help="Simulate without a window, audio or keyboard")
    argp.add_argument("--max-frames", type=int, default=None, dest="max_frames",
                      help="Stop after this many frames")
    argp.add_argument("--no-audio", action="store_true", dest="no_audio",
                      help="Do not open the audio device")
    argp.add_argument("--assets", default=None, help="Directory holding hit.wav / point.wav")
    argp.add_argument("--font", default=None,
                      help="TTF font for the score text, e.g. font.ttf from the assets "
                           "directory (default: pygame's bundled font)")
    argp.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return argp


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        profile = load_profile(args.profile)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 2

    cfg = make_config(
        profile,
        fps=args.fps,
        seed=args.seed,
        max_frames=args.max_frames,
        assets_dir=args.assets,
        font_path=args.font,
        render_mode="none" if args.headless else None,
        audio=False if (args.no_audio or args.headless) else None,
    )
    try:
        validate_config(cfg)
    except (TypeError, ValueError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    # ---------------------------------------------------------------- startup
    platform = None
    audio, input_source = NullAudio(), IdleInput()
    if cfg["render_mode"] == "human":
        try:
            with timing("Platform init", log=logger.debug):
                platform = init_platform(cfg)
        except PlatformInitError as e:
            logger.error("Failed to initialize! %s", e)
            return 1
        audio, input_source = platform.audio, platform.input
    elif cfg["max_frames"] is None:
        # nothing can set the quit flag without a window
        cfg["max_frames"] = BUILT_IN_PROFILES["headless"]["max_frames"]

    try:
        renderer = render.make(cfg["render_mode"], {**cfg, "font_path": get_font_path(cfg)})
    except ValueError as e:
        logger.error("%s", e)
        if platform is not None:
            platform.shutdown()
        return 2

    # --------------------------------------------------------------- the loop
    try:
        rng = SeededRandom(cfg["seed"])
        logger.debug("AI seed: %s", rng.seed)
        scheduler = FrameScheduler(
            GameState.initial(), input_source, audio, renderer, rng, fps=int(cfg["fps"]),
        )
        state = scheduler.run(max_frames=cfg["max_frames"])
    finally:
        renderer.close()
        if platform is not None:
            platform.shutdown()

    print(f"Final Score - Player: {state.score.player} AI: {state.score.ai}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
