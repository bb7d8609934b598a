r"""Abstract base class for rejection predicates."""

from __future__ import annotations

__all__ = ["BaseRejectionPredicate"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class BaseRejectionPredicate(ABC):
    """Abstract base class for rejection predicates.

    A rejection predicate decides whether the outcome of an attempt is a
    failure that must be retried. A returned value can be rejected (for
    example a response encoding a transient server error), and a raised
    error can be accepted as the final answer.
    """

    @abstractmethod
    def is_rejected(self, attempt: Attempt[Any]) -> bool:
        """Decide whether an attempt must be retried.

        Args:
            attempt: The attempt to evaluate.

        Returns:
            ``True`` if the attempt is rejected and retrying must be
            considered, ``False`` if its outcome is the final answer.
        """
