# arcade_pong/utils/timing.py
from __future__ import annotations
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Protocol


class Clock(Protocol):
    def ticks(self) -> int:
        """Milliseconds since an arbitrary fixed point."""

    def sleep(self, ms: int) -> None: ...


class SystemClock:
    """Wall-clock ``Clock``; ``sleep`` is a coarse delay, not a precise timer."""

    def __init__(self):
        self._origin = time.perf_counter()

    def ticks(self) -> int:
        return int((time.perf_counter() - self._origin) * 1000)

    def sleep(self, ms: int) -> None:
        if ms > 0:
            time.sleep(ms / 1000)


# --------------------------------------------------------------------------- #
# A tiny context-manager for wall-clock timing.  Usage:
#
#     with timing("my section"):
#         ...
# --------------------------------------------------------------------------- #
@contextmanager
def timing(section: str, log: Callable[[str], None] = print) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log(f"{section} took {elapsed:.3f}s")
