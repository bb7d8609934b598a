r"""Stop strategy based on the number of attempts."""

from __future__ import annotations

__all__ = ["StopAfterAttempt"]

from aretry.stop.base import BaseStopStrategy


class StopAfterAttempt(BaseStopStrategy):
    """Stop strategy that stops after a fixed number of attempts.

    Args:
        max_attempts: The maximum number of attempts, including the
            first one. Must be >= 1.

    Example:
        ```pycon
        >>> from aretry.stop import StopAfterAttempt
        >>> stop = StopAfterAttempt(3)
        >>> stop.should_stop(2, 0.0)
        False
        >>> stop.should_stop(3, 0.0)
        True

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)
        self.max_attempts = max_attempts

    def should_stop(self, attempt_number: int, elapsed: float) -> bool:  # noqa: ARG002
        return attempt_number >= self.max_attempts

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempts={self.max_attempts})"
