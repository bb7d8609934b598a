r"""Asynchronous retryer.

This module provides the AsyncRetryer class, the asyncio counterpart of
Retryer. The waits between attempts use ``asyncio.sleep``, so other
tasks run while a series is waiting, and cancelling the task during a
wait ends the series.
"""

from __future__ import annotations

__all__ = ["AsyncRetryer", "AsyncRetryerCallable"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.attempt import ErrorAttempt, ValueAttempt
from aretry.outcome import RetryOutcome
from aretry.retryer_core import BaseRetryer, elapsed_since

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from aretry.attempt import Attempt

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryer(BaseRetryer):
    """Executes an async operation and retries it until it succeeds, or
    the stop strategy decides to stop retrying.

    The operation is a zero-argument callable returning an awaitable, so
    each attempt creates a fresh coroutine.

    Only the waits between attempts are cancellable by the retryer. When
    the task is cancelled during a wait, the series ends with a
    ``RetryError`` whose cause is the ``asyncio.CancelledError``, and the
    cancellation is requested again on the current task, so the next
    ``await`` of the caller raises ``CancelledError``. One external
    cancellation therefore raises ``task.cancelling()`` to 2. Callers
    using ``asyncio.timeout`` receive the ``RetryError`` instead of a
    ``TimeoutError``, and their next ``await`` still raises
    ``CancelledError``. A cancellation received while the operation runs
    is not captured and propagates unchanged.

    Args:
        stop_strategy: The strategy deciding when to stop retrying.
        wait_strategy: The strategy deciding how long to wait between
            attempts.
        rejection_predicate: The predicate deciding whether an attempt
            is rejected and must be retried.
        callbacks: Optional lifecycle callbacks.

    Raises:
        ValueError: If one of the strategies is ``None``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryer
        >>> from aretry.predicates import RejectErrors
        >>> from aretry.stop import StopAfterAttempt
        >>> from aretry.wait import NoWait
        >>> async def fetch():
        ...     return 42
        ...
        >>> retryer = AsyncRetryer(StopAfterAttempt(3), NoWait(), RejectErrors())
        >>> asyncio.run(retryer.call(fetch))
        42

        ```
    """

    async def run(self, operation: Callable[[], Awaitable[T]]) -> RetryOutcome[T]:
        """Run the retry loop and return its terminal state.

        Args:
            operation: The zero-argument callable returning the awaitable
                to retry.

        Returns:
            The outcome of the series. It is accepted if the rejection
            predicate accepted the last attempt, and exhausted otherwise.

        Raises:
            ValueError: If the wait strategy returns a negative delay.
        """
        start_time = time.monotonic()
        attempt_number = 1
        while True:
            attempt = await self._invoke(operation, attempt_number, start_time)
            if not self._is_rejected(attempt):
                return RetryOutcome(attempt)

            error = self._check_stop(attempt, start_time)
            if error is not None:
                return RetryOutcome(attempt, error)

            sleep_time = self._compute_sleep_time(attempt, start_time)
            try:
                await asyncio.sleep(sleep_time)
            except asyncio.CancelledError as exc:
                error = self._cancel(attempt, exc, start_time)
                # Request the cancellation again for the code above the retryer
                task = asyncio.current_task()
                if task is not None:
                    task.cancel()
                return RetryOutcome(attempt, error)
            attempt_number += 1

    async def call(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Execute an async operation with automatic retry logic.

        Args:
            operation: The zero-argument callable returning the awaitable
                to retry.

        Returns:
            The value of the accepted attempt.

        Raises:
            RetryError: If the stop strategy gave up, or the wait was
                cancelled.
            Exception: The original error raised by the operation, when
                the rejection predicate accepted it as the final answer.
        """
        outcome = await self.run(operation)
        return outcome.unwrap()

    def wrap(self, operation: Callable[[], Awaitable[T]]) -> AsyncRetryerCallable[T]:
        """Wrap an async operation into a callable calling it through
        this retryer.

        Args:
            operation: The zero-argument callable returning the awaitable
                to retry.

        Returns:
            The wrapped callable. Calling it returns a coroutine, which
            can be awaited or passed to ``asyncio.create_task``.
        """
        return AsyncRetryerCallable(self, operation)

    @staticmethod
    async def _invoke(
        operation: Callable[[], Awaitable[T]], attempt_number: int, start_time: float
    ) -> Attempt[T]:
        try:
            value = await operation()
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"Attempt {attempt_number} raised {type(exc).__name__}: {exc}")
            return ErrorAttempt(exc, attempt_number, elapsed_since(start_time))
        return ValueAttempt(value, attempt_number, elapsed_since(start_time))


class AsyncRetryerCallable(Generic[T]):
    """Zero-argument callable calling an async operation through a
    retryer.

    Args:
        retryer: The retryer calling the operation.
        operation: The wrapped operation.
    """

    def __init__(self, retryer: AsyncRetryer, operation: Callable[[], Awaitable[T]]) -> None:
        self.retryer = retryer
        self.operation = operation

    async def __call__(self) -> T:
        return await self.retryer.call(self.operation)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(retryer={self.retryer!r}, operation={self.operation!r})"
