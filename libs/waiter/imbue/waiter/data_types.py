from typing import Self

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from imbue.waiter.consts import DEFAULT_WAIT_DURATION_SECONDS
from imbue.waiter.consts import DEFAULT_WAIT_INTERVAL_SECONDS


class WaitBudget(BaseModel):
    """The time allowed for a single wait: a total duration and a fixed pause between attempts.

    Both spans are in (possibly fractional) seconds. Constructing a budget directly
    validates that they are non-negative. Public entry points go through from_raw(),
    which normalizes negative input instead.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    duration: float = Field(
        default=DEFAULT_WAIT_DURATION_SECONDS,
        ge=0,
        description="Total time allowed for the wait, in seconds",
    )
    interval: float = Field(
        default=DEFAULT_WAIT_INTERVAL_SECONDS,
        ge=0,
        description="Pause between consecutive attempts, in seconds",
    )

    @classmethod
    def from_raw(cls, duration: float, interval: float) -> Self:
        """Create a budget from caller-supplied values, taking the absolute value of each."""
        return cls(duration=abs(float(duration)), interval=abs(float(interval)))

    def is_attempt_allowed(self, attempt: int) -> bool:
        """Attempt k may run only while k * interval is strictly below the duration.

        With a zero duration not even attempt 0 is allowed.
        """
        return attempt * self.interval < self.duration
