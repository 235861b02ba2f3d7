"""A stopwatch accumulating time over start/stop intervals."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


@dataclass
class Timer:
    """Accumulates elapsed time across start/stop pairs."""

    clock: Callable[[], int] = time.perf_counter_ns
    _total_ns: int = field(default=0, init=False, repr=False)
    _started_ns: int = field(default=0, init=False, repr=False)

    def start(self) -> None:
        self._started_ns = self.clock()

    def stop(self) -> None:
        self._total_ns += self.clock() - self._started_ns

    def elapsed(self) -> float:
        """Total measured time in seconds."""
        return self._total_ns / 1e9

    def __enter__(self) -> Timer:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()