"""Per-frame timing with microsecond resolution."""

from __future__ import annotations

import time
from typing import Callable


class _MicrosecondTimer:
    """Measures whole microseconds elapsed since the last reset."""

    def __init__(self, clock: Callable[[], int]) -> None:
        self._clock = clock
        self._last = clock()

    def reset(self) -> None:
        self._last = self._clock()

    def interval_and_reset(self) -> int:
        now = self._clock()
        elapsed = (now - self._last) // 1000
        self._last = now
        return elapsed


class FrameClock:
    """Tracks frame delta time and total elapsed time.

    ``clock`` returns a monotonic time in integer nanoseconds.
    Times are reported in milliseconds unless stated otherwise.
    """

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._global_timer = _MicrosecondTimer(clock)
        self._frame_timer = _MicrosecondTimer(clock)
        self._delta_time = 0.0
        self._time_since_begin = 0.0

    def init(self) -> None:
        """Restart both the frame-to-frame and the in-frame timers."""
        self._global_timer.reset()
        self._frame_timer.reset()

    def update(self) -> None:
        """Advance to a new frame."""
        micros = self._global_timer.interval_and_reset()
        self._delta_time = micros / 1000
        self._time_since_begin += self._delta_time
        self._frame_timer.reset()

    @property
    def delta_time_ms(self) -> float:
        return self._delta_time

    @property
    def delta_time_seconds(self) -> float:
        return self._delta_time / 1000

    @property
    def time_since_begin(self) -> float:
        """Sum of all frame deltas, in milliseconds."""
        return self._time_since_begin

    def frame_timer_elapsed(self) -> float:
        """Milliseconds since the frame began or since the last call; restarts the timer."""
        return self._frame_timer.interval_and_reset() / 1000