r"""Abstract base class for stop strategies."""

from __future__ import annotations

__all__ = ["BaseStopStrategy"]

from abc import ABC, abstractmethod


class BaseStopStrategy(ABC):
    """Abstract base class for stop strategies.

    A stop strategy decides whether a retry series must stop after a
    rejected attempt. It must be a pure function of its inputs, so a
    single instance can be shared by concurrent retry series.
    """

    @abstractmethod
    def should_stop(self, attempt_number: int, elapsed: float) -> bool:
        """Decide whether retrying must stop.

        Args:
            attempt_number: The number of the rejected attempt (1-indexed).
            elapsed: The time in seconds since the first attempt.

        Returns:
            ``True`` if no further attempt must be made.
        """
