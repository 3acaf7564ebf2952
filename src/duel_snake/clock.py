"""Interval triggers for tick pacing and power-up timing."""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]


class IntervalTrigger:
    """Fires once every ``interval`` seconds of a monotonic clock.

    :meth:`ready` is the only method that fires: when at least
    ``interval`` seconds passed since the last fire, it records the
    current time and returns ``True``.
    """

    def __init__(
        self,
        interval: float,
        clock: Clock | None = None,
        last_fired: float | None = None,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative.")
        self.interval = interval
        self.clock = clock if clock is not None else time.monotonic
        self.last_fired = self.clock() if last_fired is None else last_fired

    def _now(self, now: float | None) -> float:
        return self.clock() if now is None else now

    def ready(self, now: float | None = None) -> bool:
        """Fire and reset if the interval has elapsed."""
        current = self._now(now)
        if current - self.last_fired >= self.interval:
            self.last_fired = current
            return True
        return False

    def restart(self, now: float | None = None) -> None:
        """Start a fresh interval without firing."""
        self.last_fired = self._now(now)
