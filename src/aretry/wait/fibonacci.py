r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWait"]

from aretry.wait.base import BaseWaitStrategy


class FibonacciWait(BaseWaitStrategy):
    """Fibonacci wait strategy.

    Calculates delay as: base_delay * fibonacci(attempt_number), with
    optional max_delay cap. The Fibonacci sequence (1, 1, 2, 3, 5, 8, ...)
    grows more gradually than exponential delays.

    Args:
        base_delay: The base delay in seconds (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.wait import FibonacciWait
        >>> wait = FibonacciWait(base_delay=1.0)
        >>> [wait.compute_sleep_time(n, 0.0) for n in range(1, 7)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0]
        >>> wait = FibonacciWait(base_delay=1.0, max_delay=10.0)
        >>> wait.compute_sleep_time(11, 0.0)  # fib(11) = 89, but capped
        10.0

        ```
    """

    def __init__(self, base_delay: float = 1.0, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed).

        Args:
            n: The position in the Fibonacci sequence (1-indexed).

        Returns:
            The nth Fibonacci number.
        """
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:  # noqa: ARG002
        delay = self.base_delay * self._fibonacci(attempt_number)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )
