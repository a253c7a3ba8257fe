from .timing import Clock, SystemClock, timing

__all__ = ["Clock", "SystemClock", "timing"]
