from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry import AsyncRetryer, Retryer
from aretry.predicates import RejectErrors
from aretry.stop import StopAfterAttempt
from aretry.wait import FixedWait

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def retryer() -> Retryer:
    """Create a retryer making up to 3 attempts, waiting 1s between
    them, and rejecting every error."""
    return Retryer(StopAfterAttempt(3), FixedWait(1.0), RejectErrors())


@pytest.fixture
def async_retryer() -> AsyncRetryer:
    """Create an async retryer making up to 3 attempts, waiting 1s
    between them, and rejecting every error."""
    return AsyncRetryer(StopAfterAttempt(3), FixedWait(1.0), RejectErrors())


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
