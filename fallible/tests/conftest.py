"""Pytest configuration and fixtures."""

import sys
from unittest.mock import Mock

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog or traceback-hook configuration a test applied."""
    excepthook = sys.excepthook
    yield
    structlog.reset_defaults()
    sys.excepthook = excepthook


@pytest.fixture
def success_handler():
    """Call-counting handler for the success branch."""
    return Mock(return_value="from success")


@pytest.fixture
def failure_handler():
    """Call-counting handler for the failure branch."""
    return Mock(return_value="from failure")
