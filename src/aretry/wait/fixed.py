r"""Constant wait strategies."""

from __future__ import annotations

__all__ = ["FixedWait", "NoWait"]

from aretry.wait.base import BaseWaitStrategy


class FixedWait(BaseWaitStrategy):
    """Fixed wait strategy.

    Returns the same delay after every attempt, regardless of the
    attempt number.

    Args:
        delay: The fixed delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from aretry.wait import FixedWait
        >>> wait = FixedWait(delay=2.5)
        >>> wait.compute_sleep_time(1, 0.0)
        2.5
        >>> wait.compute_sleep_time(10, 30.0)
        2.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:  # noqa: ARG002
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"


class NoWait(FixedWait):
    """Wait strategy retrying immediately.

    Example:
        ```pycon
        >>> from aretry.wait import NoWait
        >>> NoWait().compute_sleep_time(3, 1.0)
        0.0

        ```
    """

    def __init__(self) -> None:
        super().__init__(delay=0.0)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
