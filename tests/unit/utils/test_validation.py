r"""Unit tests for the validation utilities."""

from __future__ import annotations

import pytest

from aretry.utils import (
    validate_attempt_number,
    validate_non_negative,
    validate_not_none,
    validate_positive,
    validate_sleep_time,
)


def test_validate_not_none() -> None:
    validate_not_none(0, "value")
    with pytest.raises(ValueError, match=r"value may not be None"):
        validate_not_none(None, "value")


@pytest.mark.parametrize("value", [0, 0.0, 1.5])
def test_validate_non_negative(value: float) -> None:
    validate_non_negative(value, "delay")


def test_validate_non_negative_invalid() -> None:
    with pytest.raises(ValueError, match=r"delay must be non-negative, got -1"):
        validate_non_negative(-1, "delay")


def test_validate_positive() -> None:
    validate_positive(0.1, "timeout")
    with pytest.raises(ValueError, match=r"timeout must be positive, got 0"):
        validate_positive(0, "timeout")


@pytest.mark.parametrize("attempt_number", [1, 2, 100])
def test_validate_attempt_number(attempt_number: int) -> None:
    validate_attempt_number(attempt_number)


def test_validate_attempt_number_invalid() -> None:
    with pytest.raises(ValueError, match=r"attempt_number must be >= 1, got 0"):
        validate_attempt_number(0)


def test_validate_sleep_time() -> None:
    validate_sleep_time(0.0)
    with pytest.raises(ValueError, match=r"negative sleep time: -0.5"):
        validate_sleep_time(-0.5)
