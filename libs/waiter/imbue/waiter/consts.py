from typing import Final

DEFAULT_WAIT_DURATION_SECONDS: Final[float] = 3.0
DEFAULT_WAIT_INTERVAL_SECONDS: Final[float] = 0.1
