class TimerError(Exception):
    """Base class for errors raised by this package."""


class InvalidDurationError(TimerError, ValueError):
    """
    Raised when a timer is constructed with a negative or NaN duration.
    """

    def __init__(self, duration: float):
        super().__init__(f"Timer duration must be non-negative, got {duration!r}")
        self.duration = duration
