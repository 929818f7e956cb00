"""A stopwatch that accumulates elapsed time across pauses."""

from __future__ import annotations

import time


class StopWatch:
    """Measures elapsed time in seconds.

    Time points are readings of :func:`time.perf_counter`. The ``*_at``
    methods accept such a reading explicitly, which is useful for testing.
    """

    __slots__ = ("_start", "_end", "_accumulated")

    def __init__(self, auto_start: bool = False) -> None:
        self._start: float | None = time.perf_counter() if auto_start else None
        self._end: float | None = None
        self._accumulated: float = 0.0

    def __repr__(self) -> str:
        state = "running" if self._start is not None and self._end is None else "idle"
        return f"StopWatch({state}, elapsed={self.elapsed():.6f}s)"

    def start(self) -> None:
        """Start at the current time, clearing any stop time."""
        self.start_at(time.perf_counter())

    def start_at(self, at: float) -> None:
        """Start at the given time, clearing any stop time."""
        self._start = at
        self._end = None

    def restart(self) -> None:
        """Start at the current time and discard all accumulated time."""
        self.restart_at(time.perf_counter())

    def restart_at(self, at: float) -> None:
        """Start at the given time and discard all accumulated time."""
        self._start = at
        self._end = None
        self._accumulated = 0.0

    def pause(self) -> None:
        """Add the running interval to the accumulated time and stop running."""
        self.pause_at(time.perf_counter())

    def pause_at(self, at: float) -> None:
        """Add the interval up to ``at`` (or the stop time, if set) and stop running."""
        if self._start is None:
            return
        until = at if self._end is None else self._end
        self._accumulated += until - self._start
        self._start = None

    def stop(self) -> None:
        """Fix the end of the current interval at the current time."""
        self.stop_at(time.perf_counter())

    def stop_at(self, at: float) -> None:
        """Fix the end of the current interval at the given time."""
        self._end = at

    def elapsed(self) -> float:
        """Return the total elapsed time in seconds."""
        if self._start is None:
            return self._accumulated
        until = time.perf_counter() if self._end is None else self._end
        return until - self._start + self._accumulated