"""Reconnect delay scheduling following the Fibonacci sequence."""

import math
from typing import Iterator

from pydantic import BaseModel, Field


class BackoffSettings(BaseModel):
    """Tunables for FibonacciBackoff. Durations are in seconds; max_duration 0 = uncapped."""

    duration_unit: float = Field(default=1.0, gt=0)
    max_duration: float = Field(default=0.0, ge=0)


class FibonacciBackoff:
    """
    Successive Fibonacci numbers scaled by duration_unit: 1, 1, 2, 3, 5, 8, ...

    When max_duration is positive, values above it are reported as max_duration
    while the underlying sequence keeps advancing, so once capped the output
    stays capped. A max_duration of zero or less means uncapped; uncapped
    values too large for a float are reported as infinity. Instances hold
    mutable state; give each reconnect loop its own.
    """

    def __init__(self, duration_unit: float = 1.0, max_duration: float = 0.0) -> None:
        self.duration_unit = duration_unit
        self.max_duration = max_duration
        self._previous, self._current = 0, 1

    @classmethod
    def from_settings(cls, settings: BackoffSettings) -> "FibonacciBackoff":
        return cls(
            duration_unit=settings.duration_unit,
            max_duration=settings.max_duration,
        )

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        self._previous, self._current = self._current, self._previous + self._current
        try:
            delay = self._previous * self.duration_unit
        except OverflowError:
            delay = math.copysign(math.inf, self.duration_unit) if self.duration_unit else 0.0
        if self.max_duration > 0 and delay > self.max_duration:
            return self.max_duration
        return delay

    def next_delay(self) -> float:
        """Advance and return the next delay in seconds."""
        return next(self)

    def reset(self) -> None:
        """Start over from the first delay, e.g. after a successful reconnect."""
        self._previous, self._current = 0, 1
