from sys import stderr
from time import sleep as _sleep
from typing import Callable

from loguru import logger

from .clock import Clock, monotonic
from .config import DEMO_END_S, DEMO_TICK_MS, LOG_FORMAT
from .timer import Timer


def main():
    logger.remove()
    logger.add(stderr, format=LOG_FORMAT)
    logger.enable("simple_timer")

    try:
        run()

    except KeyboardInterrupt:
        logger.info("✋ Interrupt handled")


def run(
    tick_ms: float = DEMO_TICK_MS,
    end_s: float = DEMO_END_S,
    clock: Clock = monotonic,
    sleep: Callable[[float], None] = _sleep,
) -> int:
    """
    Polls a periodic `tick` timer and a one-shot `end` timer until the
    latter expires. `sleep` is called with zero between iterations, which
    yields the thread for the real clock and lets a fake clock advance.

    Returns:
        The number of ticks observed
    """
    tick = Timer.from_millis(tick_ms, clock)
    end = Timer(end_s, clock)
    ticks = 0

    while True:
        if tick.expired():
            ticks += 1
            logger.info("tick")
            tick.reset()

        if end.expired():
            # not reset, one-shot
            break

        sleep(0)

    logger.info(f"Total time: {end.elapsed_ms():.0f}ms ({ticks} ticks)")
    return ticks


if __name__ == "__main__":
    main()
