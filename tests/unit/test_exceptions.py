r"""Unit tests for the retry exceptions."""

from __future__ import annotations

import asyncio
import pickle

import pytest

from aretry.attempt import ErrorAttempt, ValueAttempt
from aretry.exceptions import AttemptStateError, RetryError, SleepCancelledError

################################
#     Tests for RetryError     #
################################


def test_retry_error_stopped() -> None:
    attempt = ErrorAttempt(RuntimeError("boom"), attempt_number=3)
    error = RetryError(3, attempt)

    assert error.attempt_number == 3
    assert error.last_attempt is attempt
    assert error.cause is None
    assert not error.cancelled
    assert error.__cause__ is None
    assert str(error) == "Retrying failed to complete successfully after 3 attempts"


def test_retry_error_cancelled() -> None:
    attempt = ValueAttempt(-1, attempt_number=2)
    cause = asyncio.CancelledError()
    error = RetryError(2, attempt, cause)

    assert error.cause is cause
    assert error.cancelled
    assert error.__cause__ is cause
    assert str(error) == "Retrying was cancelled after 2 attempts: CancelledError"


def test_retry_error_is_exception() -> None:
    error = RetryError(1, ValueAttempt(0))
    with pytest.raises(RetryError, match=r"after 1 attempts"):
        raise error


def test_retry_error_attributes_are_read_only() -> None:
    error = RetryError(1, ValueAttempt(0))
    with pytest.raises(AttributeError):
        error.attempt_number = 5  # type: ignore[misc]


def test_retry_error_pickle_stopped() -> None:
    attempt = ErrorAttempt(RuntimeError("boom"), attempt_number=3)
    error = pickle.loads(pickle.dumps(RetryError(3, attempt)))

    assert isinstance(error, RetryError)
    assert error.attempt_number == 3
    assert error.last_attempt.attempt_number == 3
    assert str(error.last_attempt.get_error()) == "boom"
    assert not error.cancelled
    assert str(error) == "Retrying failed to complete successfully after 3 attempts"


def test_retry_error_pickle_cancelled() -> None:
    error = pickle.loads(
        pickle.dumps(RetryError(2, ValueAttempt(-1, attempt_number=2), SleepCancelledError("stop")))
    )

    assert error.cancelled
    assert isinstance(error.cause, SleepCancelledError)
    assert isinstance(error.__cause__, SleepCancelledError)
    assert error.last_attempt.get_value() == -1
    assert str(error) == "Retrying was cancelled after 2 attempts: SleepCancelledError"


def test_attempt_state_error_is_runtime_error() -> None:
    assert issubclass(AttemptStateError, RuntimeError)


def test_sleep_cancelled_error_is_runtime_error() -> None:
    assert issubclass(SleepCancelledError, RuntimeError)
