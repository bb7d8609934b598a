r"""Blocking retryer.

This module provides the Retryer class that invokes an operation until
its rejection predicate accepts an attempt, its stop strategy gives up,
or the wait between two attempts is cancelled. The waits block the
calling thread.
"""

from __future__ import annotations

__all__ = ["Retryer", "RetryerCallable"]

import logging
import time
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.attempt import ErrorAttempt, ValueAttempt
from aretry.exceptions import SleepCancelledError
from aretry.outcome import RetryOutcome
from aretry.retryer_core import BaseRetryer, elapsed_since

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretry.attempt import Attempt

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class Retryer(BaseRetryer):
    """Executes an operation and retries it until it succeeds, or the
    stop strategy decides to stop retrying.

    The wait strategy computes the delay between attempts, and the
    rejection predicate decides whether an attempt succeeded. The retryer
    is thread-safe provided its strategies are.

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
        >>> from aretry import Retryer
        >>> from aretry.predicates import RejectErrors
        >>> from aretry.stop import StopAfterAttempt
        >>> from aretry.wait import NoWait
        >>> retryer = Retryer(StopAfterAttempt(3), NoWait(), RejectErrors())
        >>> retryer.call(lambda: 42)
        42

        ```
    """

    def run(
        self,
        operation: Callable[[], T],
        *,
        cancel_event: threading.Event | None = None,
    ) -> RetryOutcome[T]:
        """Run the retry loop and return its terminal state.

        Each invocation of ``operation`` is captured in an attempt: a
        returned value becomes a ``ValueAttempt`` and a raised
        ``Exception`` an ``ErrorAttempt``. If the rejection predicate
        accepts the attempt, the series ends. Otherwise the stop strategy
        decides whether to give up, then the wait strategy decides how
        long to sleep before the next attempt.

        Args:
            operation: The zero-argument callable to invoke.
            cancel_event: Optional event cancelling the series. When it
                is set before or during a wait, the series ends
                immediately with a cancelled ``RetryError``. The event is
                left set, so the code above the retryer can observe the
                cancellation too.

        Returns:
            The outcome of the series. It is accepted if the rejection
            predicate accepted the last attempt, and exhausted otherwise.

        Raises:
            ValueError: If the wait strategy returns a negative delay.
        """
        start_time = time.monotonic()
        attempt_number = 1
        while True:
            attempt = self._invoke(operation, attempt_number, start_time)
            if not self._is_rejected(attempt):
                return RetryOutcome(attempt)

            error = self._check_stop(attempt, start_time)
            if error is not None:
                return RetryOutcome(attempt, error)

            sleep_time = self._compute_sleep_time(attempt, start_time)
            if self._sleep(sleep_time, cancel_event):
                cause = SleepCancelledError(f"Wait cancelled after attempt {attempt_number}")
                return RetryOutcome(attempt, self._cancel(attempt, cause, start_time))
            attempt_number += 1

    def call(
        self,
        operation: Callable[[], T],
        *,
        cancel_event: threading.Event | None = None,
    ) -> T:
        """Execute an operation with automatic retry logic.

        Args:
            operation: The zero-argument callable to invoke.
            cancel_event: Optional event cancelling the waits between
                attempts. See ``run``.

        Returns:
            The value of the accepted attempt.

        Raises:
            RetryError: If the stop strategy gave up, or the wait was
                cancelled. The error carries the number of attempts and
                the last rejected attempt.
            Exception: The original error raised by ``operation``, when
                the rejection predicate accepted it as the final answer.

        Example:
            ```pycon
            >>> from aretry import Retryer
            >>> from aretry.exceptions import RetryError
            >>> from aretry.predicates import RejectErrors
            >>> from aretry.stop import StopAfterAttempt
            >>> from aretry.wait import NoWait
            >>> def boom():
            ...     raise RuntimeError("boom")
            ...
            >>> retryer = Retryer(StopAfterAttempt(3), NoWait(), RejectErrors())
            >>> try:
            ...     retryer.call(boom)
            ... except RetryError as exc:
            ...     print(exc.attempt_number, exc.last_attempt.get_error())
            ...
            3 boom

            ```
        """
        return self.run(operation, cancel_event=cancel_event).unwrap()

    def wrap(
        self,
        operation: Callable[[], T],
        *,
        cancel_event: threading.Event | None = None,
    ) -> RetryerCallable[T]:
        """Wrap an operation into a callable calling it through this
        retryer.

        The returned callable takes no argument, so it can be submitted
        to an executor.

        Args:
            operation: The zero-argument callable to wrap.
            cancel_event: Optional event cancelling the waits between
                attempts.

        Returns:
            The wrapped callable.

        Example:
            ```pycon
            >>> from concurrent.futures import ThreadPoolExecutor
            >>> from aretry import Retryer
            >>> from aretry.predicates import RejectErrors
            >>> from aretry.stop import StopAfterAttempt
            >>> from aretry.wait import NoWait
            >>> retryer = Retryer(StopAfterAttempt(3), NoWait(), RejectErrors())
            >>> with ThreadPoolExecutor() as executor:
            ...     future = executor.submit(retryer.wrap(lambda: "done"))
            ...
            >>> future.result()
            'done'

            ```
        """
        return RetryerCallable(self, operation, cancel_event=cancel_event)

    @staticmethod
    def _invoke(
        operation: Callable[[], T], attempt_number: int, start_time: float
    ) -> Attempt[T]:
        try:
            value = operation()
        except Exception as exc:  # noqa: BLE001
            logger.debug(f"Attempt {attempt_number} raised {type(exc).__name__}: {exc}")
            return ErrorAttempt(exc, attempt_number, elapsed_since(start_time))
        return ValueAttempt(value, attempt_number, elapsed_since(start_time))

    @staticmethod
    def _sleep(sleep_time: float, cancel_event: threading.Event | None) -> bool:
        """Block for ``sleep_time`` seconds.

        Returns:
            ``True`` if the wait was cancelled.
        """
        if cancel_event is None:
            time.sleep(sleep_time)
            return False
        return cancel_event.wait(sleep_time)


class RetryerCallable(Generic[T]):
    """Zero-argument callable calling an operation through a retryer.

    Args:
        retryer: The retryer calling the operation.
        operation: The wrapped operation.
        cancel_event: Optional event cancelling the waits between
            attempts.
    """

    def __init__(
        self,
        retryer: Retryer,
        operation: Callable[[], T],
        *,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.retryer = retryer
        self.operation = operation
        self.cancel_event = cancel_event

    def __call__(self) -> T:
        return self.retryer.call(self.operation, cancel_event=self.cancel_event)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(retryer={self.retryer!r}, operation={self.operation!r})"

