"""
A simple timer to track arbitrary timeouts. There are no callbacks upon
expiry: give it a duration and poll whether it has expired. Timers can be
reset and reused for periodic work, such as a time-based control loop.
"""

from loguru import logger

from .clock import Clock, ManualClock, monotonic
from .errors import InvalidDurationError, TimerError
from .timer import Timer

__all__ = [
    "Clock",
    "InvalidDurationError",
    "ManualClock",
    "Timer",
    "TimerError",
    "monotonic",
]

logger.disable(__name__)
