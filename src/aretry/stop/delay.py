r"""Stop strategy based on the time spent retrying."""

from __future__ import annotations

__all__ = ["StopAfterDelay"]

from aretry.stop.base import BaseStopStrategy
from aretry.utils.validation import validate_non_negative


class StopAfterDelay(BaseStopStrategy):
    """Stop strategy that stops once a time budget is spent.

    The budget is checked after each rejected attempt, so the total time
    can exceed ``max_delay`` by the duration of the last attempt.

    Args:
        max_delay: The time budget in seconds, measured from the start
            of the first attempt. Must be >= 0.

    Example:
        ```pycon
        >>> from aretry.stop import StopAfterDelay
        >>> stop = StopAfterDelay(10.0)
        >>> stop.should_stop(5, 9.5)
        False
        >>> stop.should_stop(6, 10.0)
        True

        ```
    """

    def __init__(self, max_delay: float) -> None:
        validate_non_negative(max_delay, "max_delay")
        self.max_delay = max_delay

    def should_stop(self, attempt_number: int, elapsed: float) -> bool:  # noqa: ARG002
        return elapsed >= self.max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_delay={self.max_delay})"
