r"""Define the exceptions raised by the retry executors.

This module provides the terminal failure raised when a retry series
gives up, and the errors raised when the attempt model is misused.
"""

from __future__ import annotations

__all__ = ["AttemptStateError", "RetryError", "SleepCancelledError"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class AttemptStateError(RuntimeError):
    """Exception raised when an attempt is asked for the wrong outcome.

    Reading the value of a failed attempt, or the error of a successful
    one, is a programming error and is never retried.

    Example:
        ```pycon
        >>> from aretry.exceptions import AttemptStateError
        >>> raise AttemptStateError("The attempt resulted in a value, not in an error")
        Traceback (most recent call last):
            ...
        aretry.exceptions.AttemptStateError: The attempt resulted in a value, not in an error

        ```
    """


class SleepCancelledError(RuntimeError):
    """Exception recorded when a blocking wait between attempts is
    cancelled through a ``threading.Event``."""


class RetryError(Exception):
    """Exception raised when a retry series terminates without an
    accepted attempt.

    This happens when the stop strategy decides to stop retrying, or when
    the wait between two attempts is cancelled. In the second case
    ``cause`` holds the cancellation signal and is chained as
    ``__cause__``.

    Args:
        attempt_number: The number of attempts made (1-indexed).
        last_attempt: The last rejected attempt.
        cause: The cancellation that interrupted the wait, if any.

    Example:
        ```pycon
        >>> from aretry.attempt import ErrorAttempt
        >>> from aretry.exceptions import RetryError
        >>> error = RetryError(3, ErrorAttempt(ValueError("boom"), attempt_number=3))
        >>> error.attempt_number
        3
        >>> error.last_attempt.get_error()
        ValueError('boom')
        >>> error.cancelled
        False

        ```
    """

    def __init__(
        self,
        attempt_number: int,
        last_attempt: Attempt[Any],
        cause: BaseException | None = None,
    ) -> None:
        if cause is None:
            message = f"Retrying failed to complete successfully after {attempt_number} attempts"
        else:
            message = (
                f"Retrying was cancelled after {attempt_number} attempts: "
                f"{type(cause).__name__}"
            )
        super().__init__(message)
        self._attempt_number = attempt_number
        self._last_attempt = last_attempt
        self._cause = cause
        self.__cause__ = cause

    def __reduce__(self) -> tuple[Any, ...]:
        # ``args`` only holds the message, so rebuild from the attributes
        return (self.__class__, (self._attempt_number, self._last_attempt, self._cause))

    @property
    def attempt_number(self) -> int:
        """The number of attempts made before giving up."""
        return self._attempt_number

    @property
    def last_attempt(self) -> Attempt[Any]:
        """The last rejected attempt."""
        return self._last_attempt

    @property
    def cause(self) -> BaseException | None:
        """The cancellation that interrupted the wait, or ``None`` when
        the stop strategy ended the series."""
        return self._cause

    @property
    def cancelled(self) -> bool:
        """Indicate whether the series ended because the wait was
        cancelled."""
        return self._cause is not None
