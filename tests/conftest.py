"""Shared fixtures for caseconv tests."""

import pytest

from caseconv.utils import set_debug_enabled


@pytest.fixture(autouse=True)
def reset_debug_mode():
    """Every test starts and ends with debug output off."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def debug_mode():
    set_debug_enabled(True)
    yield
