import pickle

import pytest

from imbue.waiter.errors import InvalidAccessorError
from imbue.waiter.errors import WaitConfigError
from imbue.waiter.errors import WaitError
from imbue.waiter.errors import WaitTimeoutError


def test_wait_timeout_error_message_includes_duration() -> None:
    error = WaitTimeoutError(2.0)

    assert str(error) == "Wait Timeout: Exceeded duration of 2.0 seconds."
    assert error.duration == 2.0


def test_wait_timeout_errors_compare_by_duration() -> None:
    assert WaitTimeoutError(1.5) == WaitTimeoutError(1.5)
    assert WaitTimeoutError(1.5) != WaitTimeoutError(3.0)
    assert hash(WaitTimeoutError(1.5)) == hash(WaitTimeoutError(1.5))


def test_wait_timeout_error_is_catchable_as_builtin_timeout_error() -> None:
    with pytest.raises(TimeoutError):
        raise WaitTimeoutError(0.1)


def test_all_errors_share_the_wait_error_base() -> None:
    assert issubclass(WaitTimeoutError, WaitError)
    assert issubclass(WaitConfigError, WaitError)
    assert issubclass(InvalidAccessorError, WaitError)
    assert issubclass(WaitConfigError, ValueError)
    assert issubclass(InvalidAccessorError, ValueError)


def test_invalid_accessor_error_keeps_the_accessor() -> None:
    error = InvalidAccessorError(42)

    assert error.accessor == 42
    assert "42" in str(error)


def test_wait_timeout_error_survives_pickling() -> None:
    restored = pickle.loads(pickle.dumps(WaitTimeoutError(2.0)))

    assert isinstance(restored, WaitTimeoutError)
    assert restored.duration == 2.0
    assert str(restored) == "Wait Timeout: Exceeded duration of 2.0 seconds."
    assert restored == WaitTimeoutError(2.0)


def test_invalid_accessor_error_survives_pickling() -> None:
    restored = pickle.loads(pickle.dumps(InvalidAccessorError("bad path")))

    assert restored.accessor == "bad path"
    assert str(restored) == str(InvalidAccessorError("bad path"))
