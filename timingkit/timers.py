"""Named stopwatches, with a shared default collection."""

from __future__ import annotations

import threading
import time

from .stopwatch import StopWatch


class Timers:
    """A thread-safe collection of named stopwatches."""

    def __init__(self, label: str) -> None:
        self.label = label
        self._watches: dict[str, StopWatch] = {}
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Timers({self.label!r}, names={self._names()!r})"

    def _names(self) -> list[str]:
        with self._lock:
            return list(self._watches)

    def _get(self, name: str) -> StopWatch | None:
        with self._lock:
            return self._watches.get(name)

    def _get_or_create(self, name: str) -> StopWatch:
        with self._lock:
            watch = self._watches.get(name)
            if watch is None:
                watch = StopWatch(auto_start=True)
                self._watches[name] = watch
            return watch

    def _existing(self):
        for name in self._names():
            watch = self._get(name)
            if watch is not None:
                yield name, watch

    def start(self, *names: str) -> None:
        """Start the named timers, creating any that do not exist."""
        at = time.perf_counter()
        for name in names:
            self._get_or_create(name).start_at(at)

    def measure(self, name: str) -> float:
        """Pause the named timer and return its elapsed seconds."""
        watch = self._get_or_create(name)
        watch.pause()
        return watch.elapsed()

    def measure_all(self) -> dict[str, float]:
        """Pause every timer and return their elapsed seconds by name."""
        at = time.perf_counter()
        result: dict[str, float] = {}
        for name, watch in self._existing():
            watch.pause_at(at)
            result[name] = watch.elapsed()
        return result

    def elapsed(self, name: str) -> float:
        """Return the named timer's elapsed seconds without pausing it."""
        return self._get_or_create(name).elapsed()

    def elapsed_all(self) -> dict[str, float]:
        """Return every timer's elapsed seconds without pausing them."""
        return {name: watch.elapsed() for name, watch in self._existing()}

    def pause(self, *names: str) -> None:
        """Pause the named timers; unknown names are ignored."""
        at = time.perf_counter()
        for name in names:
            watch = self._get(name)
            if watch is not None:
                watch.pause_at(at)

    def pause_all(self) -> None:
        """Pause every timer."""
        at = time.perf_counter()
        for _, watch in self._existing():
            watch.pause_at(at)

    def resume(self, *names: str) -> None:
        """Resume the named timers; unknown names are ignored."""
        at = time.perf_counter()
        for name in names:
            watch = self._get(name)
            if watch is not None:
                watch.start_at(at)

    def message(self, name: str) -> str:
        """Pause the named timer and return a formatted line with its time."""
        whole_ms = int(self.measure(name) * 1000)
        value = whole_ms / 1000.0
        return f"{value:<8.3f} ms {name}"


_default_timers = Timers("defaultTimers")


def get_timers() -> Timers:
    """Return the shared default collection."""
    return _default_timers


def start(*names: str) -> None:
    """Start the named timers in the default collection."""
    _default_timers.start(*names)


def measure(name: str) -> float:
    """Pause a default timer and return its elapsed seconds."""
    return _default_timers.measure(name)


def measure_all() -> dict[str, float]:
    """Pause every default timer and return their elapsed seconds."""
    return _default_timers.measure_all()


def elapsed(name: str) -> float:
    """Return a default timer's elapsed seconds without pausing it."""
    return _default_timers.elapsed(name)


def elapsed_all() -> dict[str, float]:
    """Return every default timer's elapsed seconds without pausing them."""
    return _default_timers.elapsed_all()


def pause(*names: str) -> None:
    """Pause the named default timers."""
    _default_timers.pause(*names)


def pause_all() -> None:
    """Pause every default timer."""
    _default_timers.pause_all()


def resume(*names: str) -> None:
    """Resume the named default timers."""
    _default_timers.resume(*names)