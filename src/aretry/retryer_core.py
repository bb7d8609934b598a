r"""Shared core logic for the blocking and asynchronous retryers.

This module provides the base class holding the strategies of a
retryer, and the steps of the retry loop that do not depend on how the
operation is invoked or how the wait is performed.
"""

from __future__ import annotations

__all__ = ["BaseRetryer", "elapsed_since"]

import logging
import time
from typing import TYPE_CHECKING, Any

from aretry.callbacks import CallbackManager
from aretry.exceptions import RetryError
from aretry.utils.validation import validate_not_none, validate_sleep_time

if TYPE_CHECKING:
    from aretry.attempt import Attempt
    from aretry.callbacks import CallbackConfig
    from aretry.predicates.base import BaseRejectionPredicate
    from aretry.stop.base import BaseStopStrategy
    from aretry.wait.base import BaseWaitStrategy

logger: logging.Logger = logging.getLogger(__name__)


def elapsed_since(start_time: float) -> float:
    """Return the time in seconds since a monotonic timestamp.

    Args:
        start_time: A timestamp returned by ``time.monotonic()``.

    Returns:
        The elapsed time in seconds, never negative.
    """
    return max(time.monotonic() - start_time, 0.0)


class BaseRetryer:
    """Base class of the retryers.

    It holds the three strategies driving the retry loop. A retryer is
    immutable after construction, and each call runs with its own attempt
    counter and clock, so one instance can be shared by concurrent calls
    as long as its strategies have no shared mutable state.

    Args:
        stop_strategy: The strategy deciding when to stop retrying.
        wait_strategy: The strategy deciding how long to wait between
            attempts.
        rejection_predicate: The predicate deciding whether an attempt
            is rejected. A rejected attempt is retried unless the stop
            strategy decides otherwise or the wait is cancelled.
        callbacks: Optional lifecycle callbacks.

    Raises:
        ValueError: If one of the strategies is ``None``.
    """

    def __init__(
        self,
        stop_strategy: BaseStopStrategy,
        wait_strategy: BaseWaitStrategy,
        rejection_predicate: BaseRejectionPredicate,
        callbacks: CallbackConfig | None = None,
    ) -> None:
        validate_not_none(stop_strategy, "stop_strategy")
        validate_not_none(wait_strategy, "wait_strategy")
        validate_not_none(rejection_predicate, "rejection_predicate")

        self._stop_strategy = stop_strategy
        self._wait_strategy = wait_strategy
        self._rejection_predicate = rejection_predicate
        self._callbacks = CallbackManager(callbacks)

    @property
    def stop_strategy(self) -> BaseStopStrategy:
        return self._stop_strategy

    @property
    def wait_strategy(self) -> BaseWaitStrategy:
        return self._wait_strategy

    @property
    def rejection_predicate(self) -> BaseRejectionPredicate:
        return self._rejection_predicate

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(stop_strategy={self._stop_strategy!r}, "
            f"wait_strategy={self._wait_strategy!r}, "
            f"rejection_predicate={self._rejection_predicate!r})"
        )

    def _is_rejected(self, attempt: Attempt[Any]) -> bool:
        rejected = self._rejection_predicate.is_rejected(attempt)
        if rejected:
            logger.debug(f"Attempt {attempt.attempt_number} rejected")
        return rejected

    def _check_stop(self, attempt: Attempt[Any], start_time: float) -> RetryError | None:
        """Ask the stop strategy whether the series ends after a
        rejected attempt.

        Args:
            attempt: The rejected attempt.
            start_time: Monotonic timestamp of the first attempt.

        Returns:
            The retry error ending the series, or ``None`` if a new
            attempt must be made.
        """
        attempt_number = attempt.attempt_number
        if not self._stop_strategy.should_stop(attempt_number, elapsed_since(start_time)):
            return None
        logger.debug(f"Stopping after {attempt_number} attempts")
        return self._fail(RetryError(attempt_number, attempt), start_time)

    def _compute_sleep_time(self, attempt: Attempt[Any], start_time: float) -> float:
        """Compute the wait before the next attempt and notify the
        on_retry callback.

        Raises:
            ValueError: If the wait strategy returns a negative delay.
        """
        sleep_time = self._wait_strategy.compute_sleep_time(
            attempt.attempt_number, elapsed_since(start_time)
        )
        validate_sleep_time(sleep_time)
        logger.debug(f"Waiting {sleep_time:.2f}s before attempt {attempt.attempt_number + 1}")
        self._callbacks.on_retry(attempt, sleep_time)
        return sleep_time

    def _cancel(
        self, attempt: Attempt[Any], cause: BaseException, start_time: float
    ) -> RetryError:
        logger.debug(f"Wait cancelled after attempt {attempt.attempt_number}")
        return self._fail(RetryError(attempt.attempt_number, attempt, cause), start_time)

    def _fail(self, error: RetryError, start_time: float) -> RetryError:
        self._callbacks.on_failure(error, start_time)
        return error
