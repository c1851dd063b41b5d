"""Frame timing: the time elapsed between two refreshes."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Measures the seconds between consecutive refreshes."""

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        self._current: float | None = None
        self.delta = 0.0

    def start(self) -> None:
        self._current = self._timer()

    def refresh(self) -> None:
        now = self._timer()
        last = self._current
        self._current = now
        self.delta = 0.0 if last is None else now - last

    def reset(self) -> None:
        """Forget the last reading and report no elapsed time."""
        self._current = None
        self.delta = 0.0


default_clock = Clock()


def delta_time() -> float:
    """Seconds between the last two refreshes of the shared clock."""
    return default_clock.delta