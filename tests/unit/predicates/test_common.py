r"""Unit tests for the generic rejection predicates."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.attempt import ErrorAttempt, ValueAttempt
from aretry.predicates import (
    BaseRejectionPredicate,
    RejectAny,
    RejectAttempt,
    RejectErrors,
    RejectIf,
)

##################################
#     Tests for RejectErrors     #
##################################


def test_reject_errors_all() -> None:
    predicate = RejectErrors()
    assert predicate.error_types == (Exception,)
    assert predicate.is_rejected(ErrorAttempt(RuntimeError("boom")))
    assert predicate.is_rejected(ErrorAttempt(KeyError("missing")))


def test_reject_errors_types() -> None:
    predicate = RejectErrors(ConnectionError, TimeoutError)
    assert predicate.is_rejected(ErrorAttempt(ConnectionResetError("reset")))
    assert predicate.is_rejected(ErrorAttempt(TimeoutError()))
    assert not predicate.is_rejected(ErrorAttempt(ValueError("bad input")))


@pytest.mark.parametrize("value", [None, 0, -1, "error"])
def test_reject_errors_accepts_values(value: object) -> None:
    assert not RejectErrors().is_rejected(ValueAttempt(value))


def test_reject_errors_repr() -> None:
    assert repr(RejectErrors(OSError)) == "RejectErrors(OSError)"


##############################
#     Tests for RejectIf     #
##############################


def test_reject_if() -> None:
    predicate = RejectIf(lambda value: value < 0)
    assert predicate.is_rejected(ValueAttempt(-1))
    assert not predicate.is_rejected(ValueAttempt(42))


def test_reject_if_accepts_errors() -> None:
    func = Mock(return_value=True)
    assert not RejectIf(func).is_rejected(ErrorAttempt(RuntimeError("boom")))
    func.assert_not_called()


###################################
#     Tests for RejectAttempt     #
###################################


def test_reject_attempt() -> None:
    func = Mock(return_value=True)
    attempt = ValueAttempt("pending", attempt_number=2)
    assert RejectAttempt(func).is_rejected(attempt)
    func.assert_called_once_with(attempt)


def test_reject_attempt_false() -> None:
    assert not RejectAttempt(lambda attempt: attempt.attempt_number > 3).is_rejected(
        ErrorAttempt(RuntimeError("boom"), attempt_number=1)
    )


###############################
#     Tests for RejectAny     #
###############################


def test_reject_any() -> None:
    predicate = RejectAny(RejectErrors(OSError), RejectIf(lambda value: value is None))
    assert predicate.is_rejected(ValueAttempt(None))
    assert predicate.is_rejected(ErrorAttempt(OSError("down")))
    assert not predicate.is_rejected(ValueAttempt(1))
    assert not predicate.is_rejected(ErrorAttempt(ValueError("bad")))


def test_reject_any_empty() -> None:
    with pytest.raises(ValueError, match=r"at least one rejection predicate"):
        RejectAny()


def test_base_rejection_predicate_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseRejectionPredicate()  # type: ignore[abstract]
