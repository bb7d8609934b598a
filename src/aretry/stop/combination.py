r"""Stop strategy combining other stop strategies."""

from __future__ import annotations

__all__ = ["StopWhenAny"]

from aretry.stop.base import BaseStopStrategy


class StopWhenAny(BaseStopStrategy):
    """Stop strategy that stops as soon as one of its children stops.

    Args:
        *strategies: The stop strategies to combine. At least one is
            required.

    Example:
        ```pycon
        >>> from aretry.stop import StopAfterAttempt, StopAfterDelay, StopWhenAny
        >>> stop = StopWhenAny(StopAfterAttempt(5), StopAfterDelay(2.0))
        >>> stop.should_stop(2, 1.0)
        False
        >>> stop.should_stop(2, 2.5)
        True

        ```
    """

    def __init__(self, *strategies: BaseStopStrategy) -> None:
        if not strategies:
            msg = "StopWhenAny requires at least one stop strategy"
            raise ValueError(msg)
        self.strategies = strategies

    def should_stop(self, attempt_number: int, elapsed: float) -> bool:
        return any(strategy.should_stop(attempt_number, elapsed) for strategy in self.strategies)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({', '.join(map(repr, self.strategies))})"
