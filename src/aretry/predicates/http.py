r"""Rejection predicate for transient HTTP failures.

This module provides a predicate rejecting ``httpx`` responses whose
status code encodes a transient server error, and ``httpx`` timeouts and
network errors.
"""

from __future__ import annotations

__all__ = ["RejectHttpStatus"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretry.defaults import RETRY_STATUS_CODES
from aretry.predicates.base import BaseRejectionPredicate

if TYPE_CHECKING:
    from aretry.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class RejectHttpStatus(BaseRejectionPredicate):
    """Rejection predicate for ``httpx`` requests.

    Rejects value attempts holding an ``httpx.Response`` whose status
    code is in ``status_forcelist``. When ``retry_on_request_errors`` is
    true, error attempts holding an ``httpx.TimeoutException`` or an
    ``httpx.RequestError`` are rejected too. Every other outcome is
    accepted, so a 404 response is returned and an unrelated error is
    raised to the caller.

    Args:
        status_forcelist: Tuple of retryable HTTP status codes.
        retry_on_request_errors: Whether timeouts and network errors are
            retried.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretry.attempt import ErrorAttempt, ValueAttempt
        >>> from aretry.predicates import RejectHttpStatus
        >>> predicate = RejectHttpStatus()
        >>> predicate.is_rejected(ValueAttempt(httpx.Response(503)))
        True
        >>> predicate.is_rejected(ValueAttempt(httpx.Response(404)))
        False
        >>> predicate.is_rejected(ErrorAttempt(httpx.ConnectError("refused")))
        True

        ```
    """

    def __init__(
        self,
        status_forcelist: tuple[int, ...] = RETRY_STATUS_CODES,
        retry_on_request_errors: bool = True,
    ) -> None:
        self.status_forcelist = status_forcelist
        self.retry_on_request_errors = retry_on_request_errors

    def is_rejected(self, attempt: Attempt[Any]) -> bool:
        if attempt.has_error():
            error = attempt.get_error()
            if self.retry_on_request_errors and isinstance(
                error, (httpx.TimeoutException, httpx.RequestError)
            ):
                logger.debug(f"Rejecting attempt {attempt.attempt_number}: {type(error).__name__}")
                return True
            return False

        response = attempt.get_value()
        if not isinstance(response, httpx.Response):
            return False
        if response.status_code in self.status_forcelist:
            logger.debug(
                f"Rejecting attempt {attempt.attempt_number}: status {response.status_code}"
            )
            return True
        return False

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(status_forcelist={self.status_forcelist}, "
            f"retry_on_request_errors={self.retry_on_request_errors})"
        )
