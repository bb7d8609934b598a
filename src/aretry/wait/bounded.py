r"""Wait strategy bounding another wait strategy."""

from __future__ import annotations

__all__ = ["BoundedWait"]

import logging

from aretry.wait.base import BaseWaitStrategy

logger: logging.Logger = logging.getLogger(__name__)


class BoundedWait(BaseWaitStrategy):
    """Wait strategy clamping the delays of a wrapped strategy.

    Args:
        wait_strategy: The wrapped wait strategy.
        min_delay: The minimum delay in seconds (default: 0.0).
        max_delay: Optional maximum delay in seconds. If provided,
            individual delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretry.wait import BoundedWait, ExponentialWait
        >>> wait = BoundedWait(ExponentialWait(base_delay=1.0), min_delay=2.0, max_delay=10.0)
        >>> wait.compute_sleep_time(1, 0.0)
        2.0
        >>> wait.compute_sleep_time(3, 0.0)
        4.0
        >>> wait.compute_sleep_time(8, 0.0)
        10.0

        ```
    """

    def __init__(
        self,
        wait_strategy: BaseWaitStrategy,
        min_delay: float = 0.0,
        max_delay: float | None = None,
    ) -> None:
        if min_delay < 0:
            msg = f"min_delay must be non-negative, got {min_delay}"
            raise ValueError(msg)
        if max_delay is not None and max_delay < min_delay:
            msg = f"max_delay must be >= min_delay ({min_delay}), got {max_delay}"
            raise ValueError(msg)

        self.wait_strategy = wait_strategy
        self.min_delay = min_delay
        self.max_delay = max_delay

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:
        sleep_time = self.wait_strategy.compute_sleep_time(attempt_number, elapsed)
        if self.max_delay is not None and sleep_time > self.max_delay:
            logger.debug(
                f"Capping sleep time from {sleep_time:.2f}s to {self.max_delay:.2f}s "
                f"(max_delay={self.max_delay:.2f}s)"
            )
            sleep_time = self.max_delay
        return max(sleep_time, self.min_delay)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}({self.wait_strategy!r}, "
            f"min_delay={self.min_delay}, max_delay={self.max_delay})"
        )
