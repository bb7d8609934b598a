r"""Stop strategies deciding when a retry series gives up.

This package provides the stop strategy contract and the stock
strategies: never stop, stop after a number of attempts, stop after a
delay, and a combination stopping when any child strategy stops.
"""

from __future__ import annotations

__all__ = [
    "BaseStopStrategy",
    "NeverStop",
    "StopAfterAttempt",
    "StopAfterDelay",
    "StopWhenAny",
]

from aretry.stop.attempt import StopAfterAttempt
from aretry.stop.base import BaseStopStrategy
from aretry.stop.combination import StopWhenAny
from aretry.stop.delay import StopAfterDelay
from aretry.stop.never import NeverStop
