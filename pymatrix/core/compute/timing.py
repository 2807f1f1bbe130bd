"""
Section timing for backends.

Each backend wraps its phases (copy, forward, back, ...) in named
sections. The totals end up in Result.timing.
"""

import time
from contextlib import contextmanager
from typing import Callable, Iterator


class Timer:
    """
    Wall-clock timer for one backend call.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('eliminate'):
            ...

        timer.stop()
        timer.result()
        # {'total_seconds': 3.1e-05, 'eliminate': 2.4e-05}

    A section entered more than once accumulates. Sections may overlap.

    Args:
        clock: Monotonic clock returning seconds
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter):
        self._clock = clock
        self._began: float | None = None
        self._elapsed: float | None = None
        self._sections: dict[str, float] = {}

    @property
    def running(self) -> bool:
        return self._began is not None and self._elapsed is None

    @property
    def sections(self) -> dict[str, float]:
        """Seconds spent in each named section so far."""
        return dict(self._sections)

    def start(self) -> None:
        self._began = self._clock()
        self._elapsed = None

    def stop(self) -> None:
        if self._began is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = self._clock() - self._began

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        began = self._clock()
        try:
            yield
        finally:
            spent = self._clock() - began
            self._sections[name] = self._sections.get(name, 0.0) + spent

    def result(self) -> dict[str, float]:
        """
        Total and per-section seconds.

        Raises:
            RuntimeError: If the timer was never stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._sections}
