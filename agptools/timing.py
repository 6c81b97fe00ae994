"""Timing helpers: a stopwatch, a frames-per-second counter and a simple profiler."""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], float]


class Timer:
    """Stopwatch measuring seconds since the last start."""

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._t0 = clock()

    def start(self) -> None:
        self._t0 = self._clock()

    def restart(self) -> float:
        """Return the elapsed time and start again."""
        elapsed = self.elapsed()
        self.start()
        return elapsed

    def elapsed(self) -> float:
        return self._clock() - self._t0


class FPS:
    """Counts frames and recomputes the frame rate about once per second."""

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock
        self._t0 = clock()
        self._frames = 0
        self.last_fps = 0.0

    def update(self, print_fps: bool = True) -> bool:
        """Count one frame; return True when the frame rate was recomputed."""
        self._frames += 1
        now = self._clock()
        delta_ms = int((now - self._t0) * 1000)
        if delta_ms < 1000:
            return False
        self.last_fps = 1000.0 * self._frames / delta_ms
        self._t0 = now
        self._frames = 0
        if print_fps:
            print(f"FPS = {self.last_fps:.0f}")
        return True


class Profiler:
    """Averages the duration of a code section and reports it periodically.

    Use ``begin()``/``end()`` around the section, or the profiler as a
    context manager.
    """

    def __init__(self, name: str, refresh_ms: int = 10000, clock: Clock = time.perf_counter) -> None:
        self.name = name
        self.refresh_ms = refresh_ms
        self._clock = clock
        self._accumulator = 0
        self._count = 0
        self._t0 = clock()
        self._refresh_t0 = self._t0

    def begin(self) -> None:
        self._t0 = self._clock()

    def end(self) -> Optional[float]:
        """Close a measurement; return the reported average in microseconds, if one was due."""
        now = self._clock()
        self._accumulator += int((now - self._t0) * 1_000_000)
        self._count += 1
        if int((now - self._refresh_t0) * 1000) < self.refresh_ms:
            return None
        average = self._accumulator / self._count
        print(f"Profiler[{self.name}] -> {average:.0f} microseconds")
        self._refresh_t0 = now
        self._accumulator = 0
        self._count = 0
        return average

    def __enter__(self) -> Profiler:
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.end()