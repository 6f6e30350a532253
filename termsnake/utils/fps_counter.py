"""
Frame rate measurement.
"""
import time
from typing import Callable


class FPSCounter:
    """
    Counts frames over rolling one-second windows.

    count() reports the number of frames seen in the last completed window.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._window_start = clock()
        self._frames = 0
        self._count = 0

    def update(self):
        """Record one frame."""
        self._frames += 1
        now = self._clock()
        if now - self._window_start >= 1.0:
            self._count = self._frames
            self._frames = 0
            self._window_start = now

    def count(self) -> int:
        return self._count
