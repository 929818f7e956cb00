"""Stopwatches and named timers for measuring elapsed time."""

__version__ = "0.1.0"
__all__ = ["stopwatch", "timers"]