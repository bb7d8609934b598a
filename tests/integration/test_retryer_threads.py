r"""Integration tests for the blocking retryer with real waits and
threads."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial

import pytest

from aretry import Retryer, RetryError
from aretry.exceptions import SleepCancelledError
from aretry.predicates import RejectErrors
from aretry.stop import NeverStop, StopAfterAttempt
from aretry.wait import FixedWait, IncrementingWait, NoWait


class FlakyOperation:
    """Operation failing a number of times before returning a value."""

    def __init__(self, failures: int, value: str = "ok") -> None:
        self.failures = failures
        self.value = value
        self.calls: list[tuple[float, float]] = []

    def __call__(self) -> str:
        start = time.monotonic()
        try:
            if len(self.calls) < self.failures:
                msg = f"failure {len(self.calls) + 1}"
                raise ConnectionError(msg)
            return self.value
        finally:
            self.calls.append((start, time.monotonic()))


def test_retryer_honors_sleep_times() -> None:
    retryer = Retryer(
        StopAfterAttempt(4),
        IncrementingWait(initial_delay=0.05, increment=0.05),
        RejectErrors(),
    )
    operation = FlakyOperation(failures=3)

    assert retryer.call(operation) == "ok"
    assert len(operation.calls) == 4
    for k, expected in enumerate([0.05, 0.10, 0.15]):
        gap = operation.calls[k + 1][0] - operation.calls[k][1]
        assert gap >= expected


def test_retryer_cancel_event_interrupts_wait() -> None:
    retryer = Retryer(NeverStop(), FixedWait(30.0), RejectErrors())
    operation = FlakyOperation(failures=100)
    event = threading.Event()
    timer = threading.Timer(0.1, event.set)
    timer.start()

    start = time.monotonic()
    with pytest.raises(RetryError) as exc_info:
        retryer.call(operation, cancel_event=event)
    duration = time.monotonic() - start
    timer.join()

    assert duration < 5.0
    assert len(operation.calls) == 1
    assert exc_info.value.cancelled
    assert isinstance(exc_info.value.cause, SleepCancelledError)
    assert event.is_set()


def test_retryer_wrap_in_executor() -> None:
    retryer = Retryer(StopAfterAttempt(5), FixedWait(0.01), RejectErrors())
    operations = [FlakyOperation(failures=i, value=f"value {i}") for i in range(4)]

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = [executor.submit(retryer.wrap(operation)) for operation in operations]
        results = [future.result() for future in futures]

    assert results == ["value 0", "value 1", "value 2", "value 3"]
    assert [len(operation.calls) for operation in operations] == [1, 2, 3, 4]


def test_retryer_shared_across_threads() -> None:
    """Test that concurrent calls have independent attempt counters."""
    retryer = Retryer(StopAfterAttempt(3), FixedWait(0.01), RejectErrors())
    operations = [FlakyOperation(failures=10) for _ in range(5)]

    with ThreadPoolExecutor(max_workers=5) as executor:
        futures = [executor.submit(retryer.wrap(operation)) for operation in operations]

    for future, operation in zip(futures, operations):
        error = future.exception()
        assert isinstance(error, RetryError)
        assert error.attempt_number == 3
        assert str(error.last_attempt.get_error()) == "failure 3"
        assert len(operation.calls) == 3


def test_retryer_wrap_in_process_pool() -> None:
    """Test that the result and the retry error cross the process
    boundary."""
    retryer = Retryer(StopAfterAttempt(2), NoWait(), RejectErrors())

    with ProcessPoolExecutor(max_workers=1) as executor:
        success = executor.submit(retryer.wrap(partial(int, "42")))
        failure = executor.submit(retryer.wrap(partial(int, "boom")))

        assert success.result() == 42
        with pytest.raises(RetryError) as exc_info:
            failure.result()

    assert exc_info.value.attempt_number == 2
    assert not exc_info.value.cancelled
    assert isinstance(exc_info.value.last_attempt.get_error(), ValueError)
