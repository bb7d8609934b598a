r"""Incrementing wait strategy."""

from __future__ import annotations

__all__ = ["IncrementingWait"]

from aretry.wait.base import BaseWaitStrategy


class IncrementingWait(BaseWaitStrategy):
    """Incrementing wait strategy.

    Calculates delay as: initial_delay + increment * (attempt_number - 1),
    floored at 0 and with optional max_delay cap. A negative increment
    gives decreasing delays.

    Args:
        initial_delay: The delay after the first attempt (default: 1.0).
        increment: The amount added after each further attempt (default: 1.0).
        max_delay: Optional maximum delay cap in seconds.

    Example:
        ```pycon
        >>> from aretry.wait import IncrementingWait
        >>> wait = IncrementingWait(initial_delay=1.0, increment=0.5)
        >>> wait.compute_sleep_time(1, 0.0)
        1.0
        >>> wait.compute_sleep_time(3, 0.0)
        2.0
        >>> wait = IncrementingWait(initial_delay=1.0, increment=1.0, max_delay=3.0)
        >>> wait.compute_sleep_time(10, 0.0)
        3.0

        ```
    """

    def __init__(
        self,
        initial_delay: float = 1.0,
        increment: float = 1.0,
        max_delay: float | None = None,
    ) -> None:
        if initial_delay < 0:
            msg = f"initial_delay must be non-negative, got {initial_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.initial_delay = initial_delay
        self.increment = increment
        self.max_delay = max_delay

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:  # noqa: ARG002
        delay = max(self.initial_delay + self.increment * (attempt_number - 1), 0.0)
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay}, "
            f"increment={self.increment}, max_delay={self.max_delay})"
        )
