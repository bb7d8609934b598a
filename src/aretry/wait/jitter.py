r"""Wait strategy adding random jitter to another wait strategy."""

from __future__ import annotations

__all__ = ["JitterWait"]

import logging
import random

from aretry.wait.base import BaseWaitStrategy

logger: logging.Logger = logging.getLogger(__name__)


class JitterWait(BaseWaitStrategy):
    """Wait strategy adding random jitter to a wrapped strategy.

    The jitter is calculated as: random.uniform(0, jitter_factor) * base,
    and this jitter is ADDED to the base delay computed by the wrapped
    strategy. Jitter spreads the retries of many clients failing at the
    same time.

    Args:
        wait_strategy: The wrapped wait strategy.
        jitter_factor: Factor for the random jitter. Must be >= 0.
            Recommended value is 0.1 to add up to 10% additional delay.

    Example:
        ```pycon
        >>> from aretry.wait import FixedWait, JitterWait
        >>> wait = JitterWait(FixedWait(1.0), jitter_factor=0.1)
        >>> 1.0 <= wait.compute_sleep_time(1, 0.0) <= 1.1
        True

        ```
    """

    def __init__(self, wait_strategy: BaseWaitStrategy, jitter_factor: float = 0.1) -> None:
        if jitter_factor < 0:
            msg = f"jitter_factor must be >= 0, got {jitter_factor}"
            raise ValueError(msg)

        self.wait_strategy = wait_strategy
        self.jitter_factor = jitter_factor

    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:
        sleep_time = self.wait_strategy.compute_sleep_time(attempt_number, elapsed)
        if self.jitter_factor == 0:
            return sleep_time
        jitter = random.uniform(0, self.jitter_factor) * sleep_time  # noqa: S311
        logger.debug(f"Adding jitter to wait time (base={sleep_time:.2f}s, jitter={jitter:.2f}s)")
        return sleep_time + jitter

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}({self.wait_strategy!r}, "
            f"jitter_factor={self.jitter_factor})"
        )
