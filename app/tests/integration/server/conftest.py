"""Fixtures for server integration tests."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import LinguaService, LocaleResolver, ResourceStore
from server.server import create_app
from tests.factories.i18n import make_lingua_settings


@pytest.fixture
def lingua_settings(resources_dir):
    """Lingua settings pointing at the temporary resource directory."""
    return make_lingua_settings(RESOURCE_PATH=str(resources_dir))


@pytest.fixture
def settings(lingua_settings):
    return Settings(lingua=lingua_settings, GIT_SHA="abc123", PREFIX="dev-")


@pytest.fixture
def lingua_service(sample_bundles):
    return LinguaService(
        store=ResourceStore.build(sample_bundles.items(), default_locale="en"),
        resolver=LocaleResolver(default_locale="en", subtag_weight=0.1),
    )


@pytest.fixture
def client(settings, lingua_service):
    """Test client over an application with an injected service."""
    return TestClient(create_app(settings=settings, service=lingua_service))


@pytest.fixture
def loaded_client(settings):
    """Test client over an application loading bundles from disk."""
    return TestClient(create_app(settings=settings))
