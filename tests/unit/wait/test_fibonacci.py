r"""Unit tests for FibonacciWait."""

from __future__ import annotations

import pytest

from aretry.wait import FibonacciWait


def test_fibonacci_wait_basic() -> None:
    wait = FibonacciWait(base_delay=1.0)
    assert [wait.compute_sleep_time(n, 0.0) for n in range(1, 8)] == [
        1.0,
        1.0,
        2.0,
        3.0,
        5.0,
        8.0,
        13.0,
    ]


def test_fibonacci_wait_base_delay() -> None:
    wait = FibonacciWait(base_delay=0.5)
    assert wait.compute_sleep_time(5, 0.0) == 2.5


def test_fibonacci_wait_max_delay() -> None:
    wait = FibonacciWait(base_delay=1.0, max_delay=10.0)
    assert wait.compute_sleep_time(6, 0.0) == 8.0
    assert wait.compute_sleep_time(7, 0.0) == 10.0
    assert wait.compute_sleep_time(11, 0.0) == 10.0


def test_fibonacci_wait_defaults() -> None:
    wait = FibonacciWait()
    assert wait.base_delay == 1.0
    assert wait.max_delay is None


def test_fibonacci_number_calculation() -> None:
    assert [FibonacciWait._fibonacci(n) for n in range(12)] == [
        0,
        1,
        1,
        2,
        3,
        5,
        8,
        13,
        21,
        34,
        55,
        89,
    ]


def test_fibonacci_wait_invalid_base_delay() -> None:
    with pytest.raises(ValueError, match=r"base_delay must be non-negative"):
        FibonacciWait(base_delay=-1.0)


def test_fibonacci_wait_invalid_max_delay() -> None:
    with pytest.raises(ValueError, match=r"max_delay must be positive"):
        FibonacciWait(max_delay=0)
