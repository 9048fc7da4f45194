import asyncio
from collections.abc import Generator
from typing import Any

import pytest
from loguru import logger


class Counter:
    """A mutable object whose count the tests poll and change.

    read() counts how many times the value was sampled.
    """

    def __init__(self, count: int = 0) -> None:
        self.count = count
        self.read_count = 0

    def read(self) -> int:
        self.read_count += 1
        return self.count


class Holder:
    def __init__(self, counter: Counter) -> None:
        self.counter = counter


def read_counter(counter: Counter) -> int:
    return counter.read()


async def set_count_after(counter: Counter, value: int, delay: float) -> None:
    await asyncio.sleep(delay)
    counter.count = value


@pytest.fixture
def counter() -> Counter:
    return Counter()


@pytest.fixture
def log_records() -> Generator[list[dict[str, Any]], None, None]:
    """Capture every loguru record (down to TRACE) emitted during the test."""
    records: list[dict[str, Any]] = []

    def sink(message: Any) -> None:
        record = message.record
        records.append(
            {
                "message": record["message"],
                "level": record["level"].name,
                "extra": dict(record["extra"]),
            }
        )

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    try:
        yield records
    finally:
        logger.remove(handler_id)
