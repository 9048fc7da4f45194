from collections.abc import Callable
from typing import Any
from typing import ClassVar
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from imbue.waiter.data_types import WaitBudget
from imbue.waiter.wait import wait_until
from imbue.waiter.wait import wait_until_equal

V = TypeVar("V")


def _resolve_budget(defaults: WaitBudget, duration: float | None, interval: float | None) -> WaitBudget:
    return WaitBudget.from_raw(
        defaults.duration if duration is None else duration,
        defaults.interval if interval is None else interval,
    )


class Waitable:
    """Mixin that lets an object wait on its own values.

    Adopting classes gain wait_until() and wait_until_equal() methods that poll
    the object itself. Omitted durations and intervals come from the wait_budget
    class attribute, which subclasses may override (e.g. with load_wait_budget()).
    The mixin holds no instance state.
    """

    wait_budget: ClassVar[WaitBudget] = WaitBudget()

    async def wait_until(
        self,
        accessor: Callable[[Any], V] | str,
        condition: Callable[[V], bool],
        duration: float | None = None,
        interval: float | None = None,
    ) -> V:
        """Wait until the value read from self satisfies the condition."""
        return await wait_until(
            self,
            accessor,
            condition,
            budget=_resolve_budget(self.wait_budget, duration, interval),
        )

    async def wait_until_equal(
        self,
        accessor: Callable[[Any], V] | str,
        expected: V,
        duration: float | None = None,
        interval: float | None = None,
    ) -> V:
        """Wait until the value read from self equals expected."""
        return await wait_until_equal(
            self,
            accessor,
            expected,
            budget=_resolve_budget(self.wait_budget, duration, interval),
        )


class Waiter(BaseModel):
    """Waits on a target object whose class does not adopt Waitable.

    Offers the same methods as Waitable, with the target in place of self and
    the defaults taken from this waiter's own budget.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=False,
    )

    target: Any = Field(description="The object whose values are polled")
    budget: WaitBudget = Field(
        default_factory=WaitBudget,
        description="Defaults used when a call omits duration or interval",
    )

    async def wait_until(
        self,
        accessor: Callable[[Any], V] | str,
        condition: Callable[[V], bool],
        duration: float | None = None,
        interval: float | None = None,
    ) -> V:
        """Wait until the value read from the target satisfies the condition."""
        return await wait_until(
            self.target,
            accessor,
            condition,
            budget=_resolve_budget(self.budget, duration, interval),
        )

    async def wait_until_equal(
        self,
        accessor: Callable[[Any], V] | str,
        expected: V,
        duration: float | None = None,
        interval: float | None = None,
    ) -> V:
        """Wait until the value read from the target equals expected."""
        return await wait_until_equal(
            self.target,
            accessor,
            expected,
            budget=_resolve_budget(self.budget, duration, interval),
        )
