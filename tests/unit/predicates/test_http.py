r"""Unit tests for RejectHttpStatus."""

from __future__ import annotations

from unittest.mock import Mock

import httpx
import pytest

from aretry.attempt import ErrorAttempt, ValueAttempt
from aretry.predicates import RejectHttpStatus


@pytest.mark.parametrize("status_code", [429, 500, 502, 503, 504])
def test_reject_http_status_retryable(status_code: int) -> None:
    assert RejectHttpStatus().is_rejected(ValueAttempt(httpx.Response(status_code)))


@pytest.mark.parametrize("status_code", [200, 201, 301, 400, 404])
def test_reject_http_status_not_retryable(status_code: int) -> None:
    assert not RejectHttpStatus().is_rejected(ValueAttempt(httpx.Response(status_code)))


def test_reject_http_status_custom_forcelist() -> None:
    predicate = RejectHttpStatus(status_forcelist=(404,))
    assert predicate.is_rejected(ValueAttempt(Mock(spec=httpx.Response, status_code=404)))
    assert not predicate.is_rejected(ValueAttempt(Mock(spec=httpx.Response, status_code=503)))


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectError("refused"),
        httpx.ReadTimeout("timeout"),
        httpx.RemoteProtocolError("closed"),
    ],
)
def test_reject_http_status_request_errors(error: Exception) -> None:
    assert RejectHttpStatus().is_rejected(ErrorAttempt(error))


def test_reject_http_status_request_errors_disabled() -> None:
    predicate = RejectHttpStatus(retry_on_request_errors=False)
    assert not predicate.is_rejected(ErrorAttempt(httpx.ConnectError("refused")))


def test_reject_http_status_other_errors() -> None:
    assert not RejectHttpStatus().is_rejected(ErrorAttempt(ValueError("bad")))


def test_reject_http_status_non_response_value() -> None:
    assert not RejectHttpStatus().is_rejected(ValueAttempt(503))
