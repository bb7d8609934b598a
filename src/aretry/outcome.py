r"""Explicit result type of a retry series."""

from __future__ import annotations

__all__ = ["RetryOutcome"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from aretry.attempt import Attempt
    from aretry.exceptions import RetryError

T = TypeVar("T")


@dataclass(frozen=True)
class RetryOutcome(Generic[T]):
    """Terminal state of a retry series.

    An outcome is either *accepted*, when the rejection predicate
    accepted ``attempt`` and its value or error is the final answer, or
    *exhausted*, when ``error`` holds the ``RetryError`` produced by the
    stop strategy or by a cancelled wait.

    Args:
        attempt: The last attempt of the series.
        error: The retry error if the series is exhausted.

    Example:
        ```pycon
        >>> from aretry.attempt import ValueAttempt
        >>> from aretry.outcome import RetryOutcome
        >>> outcome = RetryOutcome(ValueAttempt(42))
        >>> outcome.accepted
        True
        >>> outcome.unwrap()
        42

        ```
    """

    attempt: Attempt[T]
    error: RetryError | None = None

    @property
    def accepted(self) -> bool:
        """Indicate whether the rejection predicate accepted the last
        attempt."""
        return self.error is None

    @property
    def exhausted(self) -> bool:
        """Indicate whether the series gave up or was cancelled."""
        return self.error is not None

    def unwrap(self) -> T:
        """Return the final value or raise the terminal failure.

        Returns:
            The value of the accepted attempt.

        Raises:
            RetryError: If the series is exhausted.
            Exception: The original error of the accepted attempt.
        """
        if self.error is not None:
            raise self.error
        return self.attempt.unwrap()
