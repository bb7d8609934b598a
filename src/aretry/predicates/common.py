r"""Generic rejection predicates."""

from __future__ import annotations

__all__ = ["RejectAny", "RejectAttempt", "RejectErrors", "RejectIf"]

from typing import TYPE_CHECKING, Any

from aretry.predicates.base import BaseRejectionPredicate

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt


class RejectErrors(BaseRejectionPredicate):
    """Rejection predicate rejecting attempts that raised an error.

    Value attempts are always accepted.

    Args:
        *error_types: The error types to reject. If none is given, every
            ``Exception`` is rejected.

    Example:
        ```pycon
        >>> from aretry.attempt import ErrorAttempt, ValueAttempt
        >>> from aretry.predicates import RejectErrors
        >>> predicate = RejectErrors(ConnectionError)
        >>> predicate.is_rejected(ErrorAttempt(ConnectionError("reset")))
        True
        >>> predicate.is_rejected(ErrorAttempt(ValueError("bad input")))
        False
        >>> predicate.is_rejected(ValueAttempt(42))
        False

        ```
    """

    def __init__(self, *error_types: type[Exception]) -> None:
        self.error_types: tuple[type[Exception], ...] = error_types or (Exception,)

    def is_rejected(self, attempt: Attempt[Any]) -> bool:
        return attempt.has_error() and isinstance(attempt.get_error(), self.error_types)

    def __repr__(self) -> str:
        names = ", ".join(error_type.__qualname__ for error_type in self.error_types)
        return f"{self.__class__.__qualname__}({names})"


class RejectIf(BaseRejectionPredicate):
    """Rejection predicate rejecting values matching a condition.

    Error attempts are always accepted, so use it with ``RejectAny`` and
    ``RejectErrors`` to retry on both.

    Args:
        predicate: Function called with the returned value. Returns
            ``True`` if the value must be retried.

    Example:
        ```pycon
        >>> from aretry.attempt import ValueAttempt
        >>> from aretry.predicates import RejectIf
        >>> predicate = RejectIf(lambda value: value < 0)
        >>> predicate.is_rejected(ValueAttempt(-1))
        True
        >>> predicate.is_rejected(ValueAttempt(42))
        False

        ```
    """

    def __init__(self, predicate: Callable[[Any], bool]) -> None:
        self.predicate = predicate

    def is_rejected(self, attempt: Attempt[Any]) -> bool:
        return attempt.has_value() and bool(self.predicate(attempt.get_value()))


class RejectAttempt(BaseRejectionPredicate):
    """Rejection predicate adapting a plain callable over attempts.

    Args:
        func: Function called with the attempt. Returns ``True`` if the
            attempt must be retried.

    Example:
        ```pycon
        >>> from aretry.attempt import ErrorAttempt
        >>> from aretry.predicates import RejectAttempt
        >>> predicate = RejectAttempt(lambda attempt: attempt.has_error())
        >>> predicate.is_rejected(ErrorAttempt(RuntimeError("boom")))
        True

        ```
    """

    def __init__(self, func: Callable[[Attempt[Any]], bool]) -> None:
        self.func = func

    def is_rejected(self, attempt: Attempt[Any]) -> bool:
        return bool(self.func(attempt))


class RejectAny(BaseRejectionPredicate):
    """Rejection predicate rejecting an attempt when any of its children
    rejects it.

    Args:
        *predicates: The predicates to combine. At least one is required.

    Example:
        ```pycon
        >>> from aretry.attempt import ErrorAttempt, ValueAttempt
        >>> from aretry.predicates import RejectAny, RejectErrors, RejectIf
        >>> predicate = RejectAny(RejectErrors(), RejectIf(lambda value: value is None))
        >>> predicate.is_rejected(ValueAttempt(None))
        True
        >>> predicate.is_rejected(ErrorAttempt(OSError("down")))
        True
        >>> predicate.is_rejected(ValueAttempt(1))
        False

        ```
    """

    def __init__(self, *predicates: BaseRejectionPredicate) -> None:
        if not predicates:
            msg = "RejectAny requires at least one rejection predicate"
            raise ValueError(msg)
        self.predicates = predicates

    def is_rejected(self, attempt: Attempt[Any]) -> bool:
        return any(predicate.is_rejected(attempt) for predicate in self.predicates)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({', '.join(map(repr, self.predicates))})"
