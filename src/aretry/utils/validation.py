r"""Parameter validation utilities for the retry logic.

This module provides validation functions to ensure the parameters of
the attempts, the strategies, and the retryers meet the required
constraints before they are used.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt_number",
    "validate_non_negative",
    "validate_not_none",
    "validate_positive",
    "validate_sleep_time",
]

from typing import Any


def validate_not_none(value: Any, name: str) -> None:
    """Validate that a required argument is provided.

    Args:
        value: The value to check.
        name: The argument name, used in the error message.

    Raises:
        ValueError: If ``value`` is ``None``.

    Example:
        ```pycon
        >>> from aretry.utils.validation import validate_not_none
        >>> validate_not_none(object(), "stop_strategy")
        >>> validate_not_none(None, "stop_strategy")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: stop_strategy may not be None

        ```
    """
    if value is None:
        msg = f"{name} may not be None"
        raise ValueError(msg)


def validate_non_negative(value: float, name: str) -> None:
    """Validate that a numeric argument is >= 0.

    Args:
        value: The value to check.
        name: The argument name, used in the error message.

    Raises:
        ValueError: If ``value`` is negative.
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_positive(value: float, name: str) -> None:
    """Validate that a numeric argument is > 0.

    Args:
        value: The value to check.
        name: The argument name, used in the error message.

    Raises:
        ValueError: If ``value`` is zero or negative.
    """
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ValueError(msg)


def validate_attempt_number(attempt_number: int) -> None:
    """Validate an attempt number.

    Args:
        attempt_number: The attempt number (1-indexed).

    Raises:
        ValueError: If ``attempt_number`` is lower than 1.
    """
    if attempt_number < 1:
        msg = f"attempt_number must be >= 1, got {attempt_number}"
        raise ValueError(msg)


def validate_sleep_time(sleep_time: float) -> None:
    """Validate the sleep time returned by a wait strategy.

    A negative sleep time is a broken wait strategy, so the error is
    raised to the caller instead of being retried.

    Args:
        sleep_time: The sleep time in seconds.

    Raises:
        ValueError: If ``sleep_time`` is negative.
    """
    if sleep_time < 0:
        msg = f"wait strategy returned a negative sleep time: {sleep_time}"
        raise ValueError(msg)
