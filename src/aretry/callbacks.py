r"""Callback types and data structures for observability.

This module provides callback support for the retryers, enabling users
to hook into the retry lifecycle for logging, metrics or alerting.

The callback system provides two lifecycle hooks:
- on_retry: Called after a rejected attempt, before the wait
- on_failure: Called when the series ends with a ``RetryError``

Example:
    ```pycon
    >>> from aretry import Retryer
    >>> from aretry.callbacks import CallbackConfig, RetryInfo
    >>> from aretry.predicates import RejectErrors
    >>> from aretry.stop import StopAfterAttempt
    >>> from aretry.wait import NoWait
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry after attempt {retry_info.attempt_number}")
    ...
    >>> retryer = Retryer(
    ...     StopAfterAttempt(3),
    ...     NoWait(),
    ...     RejectErrors(),
    ...     callbacks=CallbackConfig(on_retry=log_retry),
    ... )

    ```
"""

from __future__ import annotations

__all__ = ["CallbackConfig", "CallbackManager", "FailureInfo", "RetryInfo"]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt
    from aretry.exceptions import RetryError


@dataclass
class RetryInfo:
    """Information passed to on_retry callback.

    Attributes:
        attempt_number: The number of the rejected attempt (1-indexed).
        elapsed: The time in seconds since the first attempt.
        wait_time: The sleep time in seconds before the next attempt.
        attempt: The rejected attempt.
    """

    attempt_number: int
    elapsed: float
    wait_time: float
    attempt: Attempt[Any]


@dataclass
class FailureInfo:
    """Information passed to on_failure callback.

    Attributes:
        attempt_number: The final attempt number (1-indexed).
        error: The retry error raised to the caller.
        total_time: Total time spent on all attempts including waits (seconds).
    """

    attempt_number: int
    error: RetryError
    total_time: float


@dataclass
class CallbackConfig:
    """Configuration for callbacks.

    Attributes:
        on_retry: Optional callback invoked before each wait.
        on_failure: Optional callback invoked when the series gives up.
    """

    on_retry: Callable[[RetryInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Callbacks run in the retrying thread or task, so they should be fast.
    An exception raised by a callback propagates to the caller.

    Attributes:
        callbacks: Configuration containing callback functions for
            lifecycle events.
    """

    def __init__(self, callbacks: CallbackConfig | None = None) -> None:
        self.callbacks = callbacks if callbacks is not None else CallbackConfig()

    def on_retry(self, attempt: Attempt[Any], wait_time: float) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: The rejected attempt.
            wait_time: Sleep time before the next attempt.
        """
        if self.callbacks.on_retry:
            self.callbacks.on_retry(
                RetryInfo(
                    attempt_number=attempt.attempt_number,
                    elapsed=attempt.elapsed,
                    wait_time=wait_time,
                    attempt=attempt,
                )
            )

    def on_failure(self, error: RetryError, start_time: float) -> None:
        """Invoke on_failure callback.

        Args:
            error: The retry error ending the series.
            start_time: Monotonic timestamp of the first attempt.
        """
        if self.callbacks.on_failure:
            self.callbacks.on_failure(
                FailureInfo(
                    attempt_number=error.attempt_number,
                    error=error,
                    total_time=time.monotonic() - start_time,
                )
            )
