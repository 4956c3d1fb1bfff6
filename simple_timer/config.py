from typing import Final

# == Timer == #

DEFAULT_DURATION_S: Final = 0.0
MS_PER_S: Final = 1000.0


# == Logging == #

LOG_FORMAT: Final = "<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


# == Demo == #

DEMO_TICK_MS: Final = 100
DEMO_END_S: Final = 1.0
