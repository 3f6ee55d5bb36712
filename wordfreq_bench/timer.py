"""Wall-clock timing of the stages of a word counting run."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO


class Timer:
    """Measures elapsed time between reports and over its whole lifetime.

    Used as a context manager, it reports the total time under ``label``
    on exit.
    """

    def __init__(
        self,
        label: str = "total",
        stream: Optional[TextIO] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.label = label
        self._stream = stream
        self._clock = clock
        self.start = clock()
        self._time_point = self.start

    def dt(self, absolute: bool = False) -> float:
        """Seconds since the last lap, or since creation if ``absolute``.

        A relative measurement starts a new lap; an absolute one does not.
        """
        stop = self._clock()
        if absolute:
            return stop - self.start
        elapsed = stop - self._time_point
        self._time_point = stop
        return elapsed

    def report(self, description: str, absolute: bool = False) -> None:
        """Print the elapsed time for ``description``."""
        stream = self._stream if self._stream is not None else sys.stderr
        stream.write(f"time ({description}) = {self.dt(absolute):.3g}\n")

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.report(self.label, absolute=True)