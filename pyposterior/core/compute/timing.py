"""
Wall-clock timing for Monte Carlo runs.

Backends time their phases (observed statistic, replicates, p-value) and
attach the breakdown to Result.timing.

Usage:
    timer = Timer()
    timer.start()
    with timer.section('replicates'):
        ...
    timer.stop()
    timer.result()
    # {'total_seconds': 0.05, 'observed_stat': 0.0001, 'replicates': 0.049}
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """Total elapsed time plus accumulated named phases."""

    def __init__(self):
        self._phases: dict[str, float] = {}
        self._t0: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()
        self._elapsed = None

    def stop(self) -> None:
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time the body of a with-block under ``name``.

        Re-entering the same name adds to its total. Phases are not
        required to partition the overall run.
        """
        begin = time.perf_counter()
        try:
            yield
        finally:
            self._phases[name] = self._phases.get(name, 0.0) + (time.perf_counter() - begin)

    def result(self) -> dict[str, float]:
        """
        Timing breakdown: 'total_seconds' followed by each named phase.

        Raises:
            RuntimeError: If the timer has not been stopped.
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._phases}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a with-block; the timer is stopped on exit.

    Usage:
        with timed() as timer:
            theta = sample(Gamma(68, 45), 100_000, seed=1)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
