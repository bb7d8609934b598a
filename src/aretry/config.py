r"""Configuration dataclass for building retryers.

This module provides a dataclass-based configuration object from which
the Retryer and AsyncRetryer instances are built. The common settings
(number of attempts, time budget, exponential delays and jitter) are
plain fields; explicit strategies can be given to override them.
"""

from __future__ import annotations

__all__ = ["RetryerConfig"]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from aretry.callbacks import CallbackConfig
from aretry.defaults import DEFAULT_BASE_DELAY, DEFAULT_MAX_ATTEMPTS
from aretry.predicates import RejectErrors
from aretry.retryer import Retryer
from aretry.retryer_async import AsyncRetryer
from aretry.stop import StopAfterAttempt, StopAfterDelay, StopWhenAny
from aretry.utils.validation import validate_non_negative, validate_positive
from aretry.wait import BoundedWait, ExponentialWait, JitterWait

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import FailureInfo, RetryInfo
    from aretry.predicates.base import BaseRejectionPredicate
    from aretry.stop.base import BaseStopStrategy
    from aretry.wait.base import BaseWaitStrategy


@dataclass
class RetryerConfig:
    """Configuration for building retryers.

    Args:
        max_attempts: Maximum number of attempts, including the first
            one. Must be >= 1.
        max_delay: Optional time budget in seconds for the whole series.
            Must be >= 0 if provided. The series stops after the first
            rejected attempt past the budget.
        base_delay: Base delay of the exponential wait between attempts.
            Must be >= 0.
        max_wait_time: Optional cap of each wait in seconds. Must be > 0
            if provided.
        jitter_factor: Factor for adding random jitter to the waits.
            Must be >= 0.
        stop_strategy: Optional stop strategy replacing the one derived
            from ``max_attempts`` and ``max_delay``.
        wait_strategy: Optional wait strategy replacing the one derived
            from ``base_delay``, ``max_wait_time`` and ``jitter_factor``.
        rejection_predicate: Optional rejection predicate. Defaults to
            rejecting every error.
        on_retry: Optional callback called before each wait.
        on_failure: Optional callback called when the series gives up.

    Example:
        ```pycon
        >>> from aretry.config import RetryerConfig
        >>> config = RetryerConfig()  # Use defaults
        >>> config.max_attempts
        3
        >>> config = RetryerConfig(max_attempts=5, base_delay=0.1)
        >>> retryer = config.build()
        >>> retryer.call(lambda: "ok")
        'ok'
        >>> config.merge(max_attempts=10).max_attempts
        10

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_delay: float | None = None
    base_delay: float = DEFAULT_BASE_DELAY
    max_wait_time: float | None = None
    jitter_factor: float = 0.0
    stop_strategy: BaseStopStrategy | None = None
    wait_strategy: BaseWaitStrategy | None = None
    rejection_predicate: BaseRejectionPredicate | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        if self.max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {self.max_attempts}"
            raise ValueError(msg)
        if self.max_delay is not None:
            validate_non_negative(self.max_delay, "max_delay")
        validate_non_negative(self.base_delay, "base_delay")
        if self.max_wait_time is not None:
            validate_positive(self.max_wait_time, "max_wait_time")
        validate_non_negative(self.jitter_factor, "jitter_factor")

    def merge(self, **overrides: Any) -> RetryerConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new RetryerConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.
        """
        return {
            "max_attempts": self.max_attempts,
            "max_delay": self.max_delay,
            "base_delay": self.base_delay,
            "max_wait_time": self.max_wait_time,
            "jitter_factor": self.jitter_factor,
            "stop_strategy": self.stop_strategy,
            "wait_strategy": self.wait_strategy,
            "rejection_predicate": self.rejection_predicate,
            "on_retry": self.on_retry,
            "on_failure": self.on_failure,
        }

    def build_stop_strategy(self) -> BaseStopStrategy:
        """Return the stop strategy described by this configuration."""
        if self.stop_strategy is not None:
            return self.stop_strategy
        stop: BaseStopStrategy = StopAfterAttempt(self.max_attempts)
        if self.max_delay is not None:
            stop = StopWhenAny(stop, StopAfterDelay(self.max_delay))
        return stop

    def build_wait_strategy(self) -> BaseWaitStrategy:
        """Return the wait strategy described by this configuration.

        The cap is applied before the jitter, so a capped wait can still
        be spread by the jitter.
        """
        if self.wait_strategy is not None:
            return self.wait_strategy
        wait: BaseWaitStrategy = ExponentialWait(base_delay=self.base_delay)
        if self.max_wait_time is not None:
            wait = BoundedWait(wait, max_delay=self.max_wait_time)
        if self.jitter_factor > 0:
            wait = JitterWait(wait, jitter_factor=self.jitter_factor)
        return wait

    def build_rejection_predicate(self) -> BaseRejectionPredicate:
        """Return the rejection predicate described by this
        configuration."""
        if self.rejection_predicate is not None:
            return self.rejection_predicate
        return RejectErrors()

    def build(self) -> Retryer:
        """Build a blocking retryer from this configuration."""
        return Retryer(
            self.build_stop_strategy(),
            self.build_wait_strategy(),
            self.build_rejection_predicate(),
            callbacks=self._callback_config(),
        )

    def build_async(self) -> AsyncRetryer:
        """Build an asynchronous retryer from this configuration."""
        return AsyncRetryer(
            self.build_stop_strategy(),
            self.build_wait_strategy(),
            self.build_rejection_predicate(),
            callbacks=self._callback_config(),
        )

    def _callback_config(self) -> CallbackConfig:
        return CallbackConfig(on_retry=self.on_retry, on_failure=self.on_failure)
