"""A countdown timer driven by elapsed-time deltas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

_ZERO = timedelta(0)


@dataclass
class Timer:
    """Counts down from ``duration`` and becomes ready when it reaches zero."""

    duration: timedelta
    time_left: timedelta = field(init=False)
    ready: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.time_left = self.duration

    @classmethod
    def from_millis(cls, millis: int) -> Timer:
        """Create a timer lasting the given number of milliseconds."""
        return cls(timedelta(milliseconds=millis))

    def update(self, delta: timedelta) -> None:
        """Advance the timer by ``delta``, never going below zero."""
        self.time_left = max(self.time_left - delta, _ZERO)
        if self.time_left <= _ZERO:
            self.ready = True

    def reset(self) -> None:
        """Start counting down from the full duration again."""
        self.ready = False
        self.time_left = self.duration

    @property
    def fraction_left(self) -> float:
        """Share of the duration still remaining, from 0.0 to 1.0."""
        if self.duration <= _ZERO:
            return 0.0
        return self.time_left / self.duration