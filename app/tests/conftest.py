import json
import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.logging import configure_logging
from infrastructure.services import providers

configure_logging()


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset the application-scoped singletons around every test."""
    providers.get_settings.cache_clear()
    providers.get_resource_store.cache_clear()
    providers.get_locale_resolver.cache_clear()
    providers.get_lingua_service.cache_clear()
    yield
    providers.get_settings.cache_clear()
    providers.get_resource_store.cache_clear()
    providers.get_locale_resolver.cache_clear()
    providers.get_lingua_service.cache_clear()


@pytest.fixture(autouse=True)
def isolate_lingua_environment(monkeypatch, tmp_path):
    """Keep the developer's environment and .env file out of the tests."""
    for name in (
        "LINGUA_DEFAULT_LOCALE",
        "LINGUA_RESOURCE_PATH",
        "LINGUA_RESOURCE_EXTENSION",
        "LINGUA_OVERRIDE_KEY_NAME",
        "LINGUA_SUBTAG_WEIGHT",
        "LINGUA_COOKIE_MAX_AGE_DAYS",
        "LINGUA_CONTENT_LANGUAGE_HEADER",
        "CORS_ALLOW_ORIGINS",
        "PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_bundles():
    """Bundle contents keyed by locale."""
    return {
        "en": {"title": "Welcome", "navigation": {"home": "Home"}},
        "de-de": {"title": "Willkommen", "navigation": {"home": "Startseite"}},
    }


@pytest.fixture
def resources_dir(tmp_path, sample_bundles):
    """Create a resource directory with one JSON file per locale.

    Returns a directory structure like:
    - en.json
    - de-de.json
    """
    directory = tmp_path / "i18n"
    directory.mkdir()
    for locale, content in sample_bundles.items():
        with open(directory / f"{locale}.json", "w", encoding="utf-8") as f:
            json.dump(content, f)
    return directory
