r"""Random wait strategy."""

from __future__ import annotations

__all__ = ["RandomWait"]

import random

from aretry.wait.base import BaseWaitStrategy


class RandomWait(BaseWaitStrategy):
    """Random wait strategy.

    Draws the delay uniformly between ``min_delay`` and ``max_delay``
    after every attempt.

    Args:
        max_delay: The maximum delay in seconds.
        min_delay: The minimum delay in seconds (default: 0.0).

    Example:
        ```pycon
        >>> from aretry.wait import RandomWait
        >>> wait = RandomWait(max_delay=2.0, min_delay=1.0)
        >>> 1.0 <= wait.compute_sleep_time(1, 0.0) <= 2.0
        True

        ```
    """

    def __init__(self, max_delay: float, min_delay: float = 0.0) -> None:
        if min_delay < 0:
            msg = f"min_delay must be non-negative, got {min_delay}"
            raise ValueError(msg)
        if max_delay < min_delay:
            msg = f"max_delay must be >= min_delay ({min_delay}), got {max_delay}"
            raise ValueError(msg)

        self.min_delay = min_delay
        self.max_delay = max_delay

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:  # noqa: ARG002
        return random.uniform(self.min_delay, self.max_delay)  # noqa: S311

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(max_delay={self.max_delay}, "
            f"min_delay={self.min_delay})"
        )
