from __future__ import annotations

import time
from typing import Callable

from .config import MS_PER_S

Clock = Callable[[], float]
"""Zero-argument callable returning monotonic time in seconds."""

monotonic: Clock = time.monotonic


class ManualClock:
    """
    Monotonic clock that only moves when told to. Drop-in replacement for
    `monotonic` wherever a `Clock` is accepted, so timer behaviour can be
    exercised without sleeping.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    def __repr__(self) -> str:
        return f"ManualClock({self._now:.3f})"

    @property
    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError(f"Clock cannot move backwards ({seconds}s)")

        self._now += seconds
        return self._now

    def advance_ms(self, ms: float) -> float:
        return self.advance(ms / MS_PER_S)
