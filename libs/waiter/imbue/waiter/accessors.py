"""Ways of describing how to read the observed value from an object.

An accessor is either a callable taking the object, or a dotted attribute path
such as "count" or "stats.count" that is read with operator.attrgetter.
"""

import operator
from collections.abc import Callable
from typing import Any
from typing import TypeAlias

from imbue.waiter.errors import InvalidAccessorError

Accessor: TypeAlias = Callable[[Any], Any] | str


def _is_attribute_path(path: str) -> bool:
    return all(part.isidentifier() for part in path.split("."))


def resolve_accessor(accessor: Accessor) -> Callable[[Any], Any]:
    """Turn an accessor into a callable that reads the value from an object."""
    if isinstance(accessor, str):
        if not _is_attribute_path(accessor):
            raise InvalidAccessorError(accessor)
        return operator.attrgetter(accessor)
    if callable(accessor):
        return accessor
    raise InvalidAccessorError(accessor)


def describe_accessor(accessor: Accessor) -> str:
    if isinstance(accessor, str):
        return accessor
    return getattr(accessor, "__qualname__", repr(accessor))
