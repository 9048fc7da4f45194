"""Polling waits: sample a value from an object until a condition holds or the time budget runs out.

Each attempt reads the value exactly once and tests it exactly once. Attempt k is
only made while k * interval is strictly below the duration, so the first attempt
happens immediately and a zero duration times out without reading anything. Between
failed attempts the calling task sleeps for the interval, letting other tasks on the
event loop run (and letting cancellation of the calling task interrupt the wait).

An interval of zero is allowed but degenerate: every attempt fits in the budget, so
the wait only ends once the value changes or the task is cancelled.
"""

import asyncio
from collections.abc import Callable
from typing import Any
from typing import TypeVar

from loguru import logger

from imbue.waiter.accessors import describe_accessor
from imbue.waiter.accessors import resolve_accessor
from imbue.waiter.consts import DEFAULT_WAIT_DURATION_SECONDS
from imbue.waiter.consts import DEFAULT_WAIT_INTERVAL_SECONDS
from imbue.waiter.data_types import WaitBudget
from imbue.waiter.errors import WaitTimeoutError
from imbue.waiter.logging import log_wait_span

O = TypeVar("O")
V = TypeVar("V")


async def wait_until(
    obj: O,
    accessor: Callable[[O], V] | str,
    condition: Callable[[V], bool],
    duration: float = DEFAULT_WAIT_DURATION_SECONDS,
    interval: float = DEFAULT_WAIT_INTERVAL_SECONDS,
    budget: WaitBudget | None = None,
) -> V:
    """Wait until the value read from obj satisfies the condition, and return that value.

    Negative durations and intervals are treated as their absolute values. When a
    budget is given it is used as-is and duration/interval are ignored.

    Raises WaitTimeoutError if the condition is not satisfied within the duration.
    Exceptions raised by the accessor or the condition propagate unchanged.
    """
    resolved_budget = budget if budget is not None else WaitBudget.from_raw(duration, interval)
    read_value = resolve_accessor(accessor)
    with log_wait_span(describe_accessor(accessor), resolved_budget):
        return await _poll(obj, read_value, condition, resolved_budget)


async def wait_until_equal(
    obj: O,
    accessor: Callable[[O], V] | str,
    expected: V,
    duration: float = DEFAULT_WAIT_DURATION_SECONDS,
    interval: float = DEFAULT_WAIT_INTERVAL_SECONDS,
    budget: WaitBudget | None = None,
) -> V:
    """Wait until the value read from obj equals expected, and return that value."""
    return await wait_until(
        obj,
        accessor,
        lambda value: value == expected,
        duration=duration,
        interval=interval,
        budget=budget,
    )


async def _poll(
    obj: Any,
    read_value: Callable[[Any], V],
    condition: Callable[[V], bool],
    budget: WaitBudget,
) -> V:
    attempt = 0
    while budget.is_attempt_allowed(attempt):
        value = read_value(obj)
        if condition(value):
            return value
        logger.trace("Attempt {} did not satisfy the condition, retrying in {}s", attempt, budget.interval)
        await asyncio.sleep(budget.interval)
        attempt += 1
    raise WaitTimeoutError(budget.duration)
