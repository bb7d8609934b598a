r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy"]

from abc import ABC, abstractmethod


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to sleep after a rejected
    attempt, before the next one is made.
    """

    @abstractmethod
    def compute_sleep_time(self, attempt_number: int, elapsed: float) -> float:
        """Compute the delay before the next attempt.

        Args:
            attempt_number: The number of the rejected attempt (1-indexed).
                For example, attempt_number=1 is the wait before the first
                retry.
            elapsed: The time in seconds since the first attempt.

        Returns:
            The delay in seconds. Must be >= 0, and 0 means the next
            attempt is made immediately.
        """
