"""Fixtures for infrastructure.logging tests."""

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Development settings with a debug log level."""
    return Settings(LOG_LEVEL="DEBUG", PREFIX="dev-")
