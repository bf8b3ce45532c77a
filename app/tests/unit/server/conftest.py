"""Fixtures for server module unit tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from infrastructure.i18n import LinguaService, LocaleResolver
from tests.factories.i18n import make_resource_store


@pytest.fixture
def lingua_service():
    """Lingua service over an {en, de-de} store defaulting to en."""
    return LinguaService(
        store=make_resource_store(["en", "de-de"], default_locale="en"),
        resolver=LocaleResolver(default_locale="en", subtag_weight=0.1),
    )


@pytest.fixture
def make_request():
    """Build a mock request carrying the given locale signals."""

    def _make_request(query=None, cookies=None, headers=None):
        request = MagicMock()
        request.query_params = query or {}
        request.cookies = cookies or {}
        request.headers = headers or {}
        request.state = MagicMock()
        return request

    return _make_request


@pytest.fixture
def call_next():
    """Mock downstream handler returning a response with real headers."""
    response = MagicMock()
    response.headers = {}
    handler = AsyncMock()
    handler.return_value = response
    return handler
