r"""aretry - Generic retry executor with pluggable policies.

This package invokes an arbitrary operation until a rejection predicate
accepts its outcome, a stop strategy gives up, or the wait between two
attempts is cancelled. Every invocation is captured in an attempt
holding either the returned value or the raised error, so the policies
inspect failures as data.

Key Features:
    - Attempt outcome model unifying returned values and raised errors
    - Pluggable stop strategies (attempt count, time budget, combinations)
    - Pluggable wait strategies: fixed, incrementing, exponential,
      Fibonacci, random, jitter and bounds
    - Pluggable rejection predicates, including one for transient HTTP
      failures of httpx requests
    - Blocking and asyncio retryers with cancellable waits
    - Callbacks for observability (logging, metrics, alerting)

Example:
    ```pycon
    >>> from aretry import Retryer
    >>> from aretry.predicates import RejectErrors
    >>> from aretry.stop import StopAfterAttempt
    >>> from aretry.wait import ExponentialWait
    >>> retryer = Retryer(StopAfterAttempt(5), ExponentialWait(base_delay=0.1), RejectErrors())
    >>> retryer.call(lambda: "ok")
    'ok'
    >>> # Use the configuration object for the common settings
    >>> from aretry import RetryerConfig
    >>> retryer = RetryerConfig(max_attempts=5, max_delay=30.0).build()

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryer",
    "Attempt",
    "AttemptStateError",
    "ErrorAttempt",
    "RetryError",
    "RetryOutcome",
    "Retryer",
    "RetryerConfig",
    "SleepCancelledError",
    "ValueAttempt",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.attempt import Attempt, ErrorAttempt, ValueAttempt
from aretry.config import RetryerConfig
from aretry.exceptions import AttemptStateError, RetryError, SleepCancelledError
from aretry.outcome import RetryOutcome
from aretry.retryer import Retryer
from aretry.retryer_async import AsyncRetryer

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
