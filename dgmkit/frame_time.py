"""Measurement of time between frames."""

from __future__ import annotations

import time
from datetime import timedelta


class FrameTime:
    """Holds the time that passed between the two most recent resets."""

    def __init__(self):
        self._last = time.perf_counter()
        self.elapsed = timedelta(0)
        self.delta_time = 0.0
        self.reset()

    def reset(self):
        """Restart the clock and store the time elapsed since the last reset."""
        now = time.perf_counter()
        self.delta_time = now - self._last
        self.elapsed = timedelta(seconds=self.delta_time)
        self._last = now