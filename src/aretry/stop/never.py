r"""Stop strategy that never stops."""

from __future__ import annotations

__all__ = ["NeverStop"]

from aretry.stop.base import BaseStopStrategy


class NeverStop(BaseStopStrategy):
    """Stop strategy that never stops retrying.

    Combined with a rejection predicate that keeps rejecting, the retry
    series never ends.

    Example:
        ```pycon
        >>> from aretry.stop import NeverStop
        >>> NeverStop().should_stop(1000, 3600.0)
        False

        ```
    """

    def should_stop(self, attempt_number: int, elapsed: float) -> bool:  # noqa: ARG002
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
