"""Shared test fixtures for phpexpr.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
grammar-specific helpers close to the tests that use them.
"""
from __future__ import annotations

import pytest

from phpexpr.parser.cursor import Cursor


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "phpexpr"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def cursor_at():
    """Return a factory building a cursor over a source buffer."""

    def factory(source: bytes, offset: int = 0) -> Cursor:
        return Cursor(source, offset)

    return factory
