import time
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger

from imbue.waiter.data_types import WaitBudget
from imbue.waiter.errors import WaitTimeoutError


@contextmanager
def log_wait_span(description: str, budget: WaitBudget) -> Iterator[None]:
    """Context manager that logs the lifetime of a single wait.

    On entry, emits a debug message naming what is being waited for.
    On success, emits a trace message with the elapsed time.
    On timeout, emits a debug message with the elapsed time; any other exception
    (including cancellation) is traced and re-raised unchanged.

    The duration and interval are bound via logger.contextualize so that every
    message logged during the wait carries them as extra fields.
    """
    with logger.contextualize(duration=budget.duration, interval=budget.interval):
        logger.debug("Waiting for {} (duration={}s, interval={}s)", description, budget.duration, budget.interval)
        start_time = time.monotonic()
        try:
            yield
        except WaitTimeoutError:
            elapsed = time.monotonic() - start_time
            logger.debug("Waiting for {} [timed out after {:.5f} sec]", description, elapsed)
            raise
        except BaseException:
            elapsed = time.monotonic() - start_time
            logger.trace("Waiting for {} [failed after {:.5f} sec]", description, elapsed)
            raise
        else:
            elapsed = time.monotonic() - start_time
            logger.trace("Waiting for {} [done in {:.5f} sec]", description, elapsed)
