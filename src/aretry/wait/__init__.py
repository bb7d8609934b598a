r"""Wait strategies computing the delay between attempts.

This package provides the wait strategy contract and the stock
strategies: no wait, fixed, incrementing, exponential, Fibonacci and
random delays, plus wrappers adding jitter or bounding another
strategy.
"""

from __future__ import annotations

__all__ = [
    "BaseWaitStrategy",
    "BoundedWait",
    "ExponentialWait",
    "FibonacciWait",
    "FixedWait",
    "IncrementingWait",
    "JitterWait",
    "NoWait",
    "RandomWait",
]

from aretry.wait.base import BaseWaitStrategy
from aretry.wait.bounded import BoundedWait
from aretry.wait.exponential import ExponentialWait
from aretry.wait.fibonacci import FibonacciWait
from aretry.wait.fixed import FixedWait, NoWait
from aretry.wait.incrementing import IncrementingWait
from aretry.wait.jitter import JitterWait
from aretry.wait.random_wait import RandomWait
