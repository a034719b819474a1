"""A stopwatch with nanosecond resolution."""

from __future__ import annotations

import time
from typing import Optional


class Timer:
    """Measures elapsed time between ``start`` and ``stop``.

    While running, readings are taken against the current time; after
    ``stop`` they are frozen.
    """

    def __init__(self) -> None:
        self.started = False
        self.running = False
        self._start_ns: Optional[int] = None
        self._end_ns: Optional[int] = None

    def start(self) -> None:
        """Start (or restart) timing."""
        self._start_ns = time.perf_counter_ns()
        self.started = True
        self.running = True

    def stop(self) -> None:
        """Stop timing and freeze the reading."""
        self._end_ns = time.perf_counter_ns()
        self.running = False

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def nanoseconds(self) -> int:
        """Elapsed time in whole nanoseconds."""
        if self._start_ns is None:
            raise RuntimeError("timer was never started")
        if self.running or self._end_ns is None:
            end = time.perf_counter_ns()
        else:
            end = self._end_ns
        return end - self._start_ns

    def milliseconds(self) -> int:
        """Elapsed time in whole milliseconds, truncated."""
        return self.nanoseconds() // 1_000_000