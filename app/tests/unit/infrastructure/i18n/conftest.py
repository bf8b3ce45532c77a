"""Feature-level fixtures for i18n system tests.

Provides specific fixtures for negotiation and resource resolution scenarios.
"""

import pytest

from infrastructure.i18n import FileBundleLoader, LocaleResolver
from tests.factories.i18n import make_resource_store


@pytest.fixture
def store():
    """Store with "en" (default) and "de-de" bundles."""
    return make_resource_store(["en", "de-de"], default_locale="en")


@pytest.fixture
def resolver():
    """Resolver defaulting to "en" with subtag promotion at 0.1."""
    return LocaleResolver(default_locale="en", subtag_weight=0.1)


@pytest.fixture
def file_loader(resources_dir):
    """FileBundleLoader for the temporary resource directory."""
    return FileBundleLoader(resources_dir)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "ties": "a;q=0.5,b;q=0.5,c;q=0.9",
        "regional": "fr-fr;q=0.9,en;q=0.5",
        "invalid_quality": "en;q=invalid,fr;q=0.5",
        "spaced": " en-GB ; q=0.8 , de ",
    }
