r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

from aretry.wait.base import BaseWaitStrategy


class ExponentialWait(BaseWaitStrategy):
    """Exponential wait strategy.

    Calculates delay as: base_delay * (2 ** (attempt_number - 1)), with
    optional max_delay cap.

    Args:
        base_delay: The delay after the first attempt (default: 0.3).
        max_delay: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretry.wait import ExponentialWait
        >>> wait = ExponentialWait(base_delay=0.3)
        >>> wait.compute_sleep_time(1, 0.0)
        0.3
        >>> wait.compute_sleep_time(2, 0.0)
        0.6
        >>> wait.compute_sleep_time(3, 0.0)
        1.2
        >>> # With max_delay cap
        >>> wait = ExponentialWait(base_delay=1.0, max_delay=5.0)
        >>> wait.compute_sleep_time(11, 0.0)  # Would be 1024.0, but capped
        5.0

        ```
    """

    def __init__(self, base_delay: float = 0.3, max_delay: float | None = None) -> None:
        if base_delay < 0:
            msg = f"base_delay must be non-negative, got {base_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay <= 0:
            msg = f"max_delay must be positive if specified, got {max_delay}"
            raise ValueError(msg)

        self.base_delay = base_delay
        self.max_delay = max_delay

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:  # noqa: ARG002
        delay = self.base_delay * (2 ** (attempt_number - 1))
        if self.max_delay is not None:
            delay = min(delay, self.max_delay)
        return delay

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(base_delay={self.base_delay}, "
            f"max_delay={self.max_delay})"
        )
