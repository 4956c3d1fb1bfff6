from __future__ import annotations

import math
from datetime import timedelta
from numbers import Real

from loguru import logger

from .clock import Clock, monotonic
from .config import DEFAULT_DURATION_S, MS_PER_S
from .errors import InvalidDurationError


class Timer:
    """
    Tracks whether a fixed span of time has passed since the timer was
    created or last reset. Nothing happens on expiry; the owner polls
    `expired()` from its own loop and calls `reset()` to start a new
    interval, which makes it suitable for simple time-based control loops.

    Durations are in seconds (`int`, `float` or `timedelta`). A negative or
    NaN duration raises `InvalidDurationError`. A zero duration gives a
    timer that is expired immediately and is only useful for `elapsed()`.

    Timers are not synchronised: sharing one between threads requires an
    external lock.
    """

    __slots__ = ("_clock", "_duration", "_start")

    def __init__(
        self, duration: float | timedelta = DEFAULT_DURATION_S, clock: Clock = monotonic
    ) -> None:
        self._duration = _to_seconds(duration)
        self._clock = clock
        self._start = clock()

        logger.trace("Created timer with duration {:.3f}s", self._duration)

    @classmethod
    def from_millis(cls, ms: float, clock: Clock = monotonic) -> Timer:
        return cls(_to_seconds(ms) / MS_PER_S, clock)

    @classmethod
    def from_secs(cls, secs: float, clock: Clock = monotonic) -> Timer:
        return cls(secs, clock)

    def __repr__(self) -> str:
        return f"Timer(duration={self._duration:.3f}s, elapsed={self.elapsed():.3f}s)"

    def __copy__(self) -> Timer:
        return self.copy()

    @property
    def duration(self) -> float:
        return self._duration

    @property
    def clock(self) -> Clock:
        return self._clock

    def reset(self) -> None:
        """
        Restarts the interval. Timers with a non-zero duration are no longer
        expired afterwards and `elapsed()` starts over from zero.
        """
        self._start = self._clock()
        logger.trace("Timer reset")

    def elapsed(self) -> float:
        """
        Returns:
            Seconds since construction or the last `reset()`, never negative
        """
        return max(0.0, self._clock() - self._start)

    def elapsed_ms(self) -> float:
        return self.elapsed() * MS_PER_S

    def expired(self) -> bool:
        """
        Returns:
            True once the elapsed time has reached the duration. Stays true
            until the timer is reset.
        """
        return self.elapsed() >= self._duration

    def remaining(self) -> float:
        return max(0.0, self._duration - self.elapsed())

    def copy(self) -> Timer:
        timer = type(self).__new__(type(self))
        timer._clock = self._clock
        timer._duration = self._duration
        timer._start = self._start
        return timer


def _to_seconds(duration: float | timedelta) -> float:
    if isinstance(duration, timedelta):
        seconds = duration.total_seconds()

    elif isinstance(duration, Real) and not isinstance(duration, bool):
        seconds = float(duration)

    else:
        raise TypeError(
            f"Timer duration must be a number of seconds or a timedelta, got {type(duration).__name__}"
        )

    if math.isnan(seconds) or seconds < 0:
        raise InvalidDurationError(duration)

    return seconds
