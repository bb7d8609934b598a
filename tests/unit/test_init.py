r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import aretry


def test_package_version_is_string() -> None:
    assert isinstance(aretry.__version__, str)


def test_package_version_format() -> None:
    assert "." in aretry.__version__


def test_all_exports_defined() -> None:
    for name in aretry.__all__:
        assert hasattr(aretry, name), f"{name} is in __all__ but not defined in module"


def test_public_api() -> None:
    assert aretry.Retryer.__module__ == "aretry.retryer"
    assert aretry.AsyncRetryer.__module__ == "aretry.retryer_async"
    assert issubclass(aretry.RetryError, Exception)
