r"""Utility functions shared by the retry executors and strategies.

This package provides parameter validation helpers used by the attempt
model, the strategies, and the configuration.
"""

from __future__ import annotations

__all__ = [
    "validate_attempt_number",
    "validate_non_negative",
    "validate_not_none",
    "validate_positive",
    "validate_sleep_time",
]

from aretry.utils.validation import (
    validate_attempt_number,
    validate_non_negative,
    validate_not_none,
    validate_positive,
    validate_sleep_time,
)
