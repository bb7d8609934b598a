r"""Attempt outcome model.

An attempt is the captured outcome of one invocation of the retried
operation: either the value it returned or the error it raised, plus
the attempt number and the time elapsed since the first attempt. The
rejection predicates inspect attempts as data instead of relying on
exception handling.
"""

from __future__ import annotations

__all__ = ["Attempt", "ErrorAttempt", "ValueAttempt"]

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from aretry.exceptions import AttemptStateError
from aretry.utils.validation import validate_attempt_number, validate_non_negative

T = TypeVar("T")


class Attempt(ABC, Generic[T]):
    """Abstract base class for the outcome of one invocation.

    Concrete attempts expose ``attempt_number`` (1-indexed) and
    ``elapsed`` (seconds since the first attempt of the series).
    """

    attempt_number: int
    elapsed: float

    @abstractmethod
    def has_value(self) -> bool:
        """Indicate whether the invocation returned a value."""

    @abstractmethod
    def has_error(self) -> bool:
        """Indicate whether the invocation raised an error."""

    @abstractmethod
    def unwrap(self) -> T:
        """Return the value, or re-raise the captured error.

        Returns:
            The value returned by the invocation.

        Raises:
            Exception: The original error raised by the invocation.
        """

    @abstractmethod
    def get_value(self) -> T:
        """Return the value returned by the invocation.

        Raises:
            AttemptStateError: If the invocation raised an error.
        """

    @abstractmethod
    def get_error(self) -> Exception:
        """Return the error raised by the invocation.

        Raises:
            AttemptStateError: If the invocation returned a value.
        """


@dataclass(frozen=True)
class ValueAttempt(Attempt[T]):
    """Attempt whose invocation returned a value.

    Args:
        value: The value returned by the invocation.
        attempt_number: The attempt number (1-indexed).
        elapsed: The time in seconds since the first attempt.

    Example:
        ```pycon
        >>> from aretry.attempt import ValueAttempt
        >>> attempt = ValueAttempt(42)
        >>> attempt.has_value()
        True
        >>> attempt.unwrap()
        42

        ```
    """

    value: T
    attempt_number: int = 1
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        validate_attempt_number(self.attempt_number)
        validate_non_negative(self.elapsed, "elapsed")

    def has_value(self) -> bool:
        return True

    def has_error(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def get_value(self) -> T:
        return self.value

    def get_error(self) -> NoReturn:
        msg = "The attempt resulted in a value, not in an error"
        raise AttemptStateError(msg)


@dataclass(frozen=True)
class ErrorAttempt(Attempt[T]):
    """Attempt whose invocation raised an error.

    The error object is kept as-is, with its traceback, so ``unwrap``
    re-raises exactly what the invocation raised.

    Args:
        error: The error raised by the invocation.
        attempt_number: The attempt number (1-indexed).
        elapsed: The time in seconds since the first attempt.

    Example:
        ```pycon
        >>> from aretry.attempt import ErrorAttempt
        >>> attempt = ErrorAttempt(ValueError("boom"))
        >>> attempt.has_error()
        True
        >>> attempt.get_error()
        ValueError('boom')

        ```
    """

    error: Exception
    attempt_number: int = 1
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        validate_attempt_number(self.attempt_number)
        validate_non_negative(self.elapsed, "elapsed")

    def has_value(self) -> bool:
        return False

    def has_error(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def get_value(self) -> NoReturn:
        msg = "The attempt resulted in an error, not in a value"
        raise AttemptStateError(msg)

    def get_error(self) -> Exception:
        return self.error
