"""Simple wall-clock stopwatch reporting milliseconds."""

from __future__ import annotations

import time
from typing import Callable

__all__ = ["Timer"]


class Timer:
    """Stopwatch that starts on creation and reports elapsed milliseconds."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._start = 0.0
        self.begin()

    def begin(self) -> None:
        """Restart the stopwatch."""
        self._start = self._clock()

    def end(self) -> float:
        """Return milliseconds elapsed since the last start."""
        return (self._clock() - self._start) * 1000.0

    def report(self, task_name: str) -> float:
        """Print the elapsed time for ``task_name`` and return it in milliseconds."""
        elapsed = self.end()
        print(f"{task_name} use time(ms): {elapsed:.3g}")
        return elapsed