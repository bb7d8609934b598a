r"""Rejection predicates deciding which attempts must be retried.

This package provides the rejection predicate contract and stock
predicates rejecting errors, rejecting values, adapting plain
callables, combining predicates, and rejecting transient HTTP failures.
"""

from __future__ import annotations

__all__ = [
    "BaseRejectionPredicate",
    "RejectAny",
    "RejectAttempt",
    "RejectErrors",
    "RejectHttpStatus",
    "RejectIf",
]

from aretry.predicates.base import BaseRejectionPredicate
from aretry.predicates.common import RejectAny, RejectAttempt, RejectErrors, RejectIf
from aretry.predicates.http import RejectHttpStatus
