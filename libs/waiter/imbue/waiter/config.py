import os
from collections.abc import Mapping
from typing import Final

from imbue.waiter.consts import DEFAULT_WAIT_DURATION_SECONDS
from imbue.waiter.consts import DEFAULT_WAIT_INTERVAL_SECONDS
from imbue.waiter.data_types import WaitBudget
from imbue.waiter.errors import WaitConfigError

# Only consulted by load_wait_budget(); the wait functions never read the environment.
DURATION_ENV_VAR: Final[str] = "WAITER_DURATION_SECONDS"
INTERVAL_ENV_VAR: Final[str] = "WAITER_INTERVAL_SECONDS"


def _parse_seconds(environ: Mapping[str, str], name: str, default: float) -> float:
    raw_value = environ.get(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return float(raw_value.strip())
    except ValueError as e:
        raise WaitConfigError(f"{name} must be a number of seconds, got {raw_value!r}") from e


def load_wait_budget(environ: Mapping[str, str] | None = None) -> WaitBudget:
    """Build a WaitBudget from environment variables, falling back to the defaults.

    Values are normalized exactly like call arguments (absolute value taken).
    """
    if environ is None:
        environ = os.environ
    duration = _parse_seconds(environ, DURATION_ENV_VAR, DEFAULT_WAIT_DURATION_SECONDS)
    interval = _parse_seconds(environ, INTERVAL_ENV_VAR, DEFAULT_WAIT_INTERVAL_SECONDS)
    return WaitBudget.from_raw(duration, interval)
