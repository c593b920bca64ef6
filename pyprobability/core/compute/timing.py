"""
Wall-clock timing for simulation backends.

A backend starts one Timer per solve(), wraps each phase in a named
section, and stores timer.result() in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Total run time plus per-phase durations.

    Re-entering a section name adds to its running total, so a phase
    timed inside a loop reports the sum over all iterations.
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._started: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._started = time.perf_counter()

    def stop(self) -> None:
        if self._started is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._started

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent in the with-block to section `name`."""
        began = time.perf_counter()
        try:
            yield
        finally:
            spent = time.perf_counter() - began
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Seconds per section, plus 'total_seconds' for start() to stop().

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}
