class WaitError(Exception):
    """Base error for the waiter library."""


class WaitTimeoutError(WaitError, TimeoutError):
    """Raised when a wait exhausts its duration before the condition is satisfied."""

    def __init__(self, duration: float) -> None:
        self.duration = duration
        super().__init__(f"Wait Timeout: Exceeded duration of {duration} seconds.")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WaitTimeoutError):
            return NotImplemented
        return type(self) is type(other) and self.duration == other.duration

    def __hash__(self) -> int:
        return hash((type(self), self.duration))

    def __reduce__(self) -> tuple[type["WaitTimeoutError"], tuple[float]]:
        return (type(self), (self.duration,))


class WaitConfigError(WaitError, ValueError):
    """Raised when wait configuration from the environment cannot be parsed."""


class InvalidAccessorError(WaitError, ValueError):
    """Raised when an accessor is neither a callable nor a valid dotted attribute path."""

    def __init__(self, accessor: object) -> None:
        self.accessor = accessor
        super().__init__(f"Accessor must be a callable or a dotted attribute path, got {accessor!r}")

    def __reduce__(self) -> tuple[type["InvalidAccessorError"], tuple[object]]:
        return (type(self), (self.accessor,))
