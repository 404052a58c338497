"""Shared fixtures."""

import pytest

from istringscheck.utils.colors import Colors
from istringscheck.utils.logging import reset_logger


@pytest.fixture(autouse=True)
def fresh_logger():
    """Logger handlers bind sys.stdout when created, so rebuild them per test."""
    reset_logger()
    Colors.enabled = True
    yield
    reset_logger()
    Colors.enabled = True


@pytest.fixture
def identity_recoder():
    """Recoder stand-in that returns the input unchanged."""
    return lambda data, encoding: data
