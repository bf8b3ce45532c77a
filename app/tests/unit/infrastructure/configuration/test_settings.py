"""Unit tests for infrastructure.configuration.settings module.

Tests cover:
- LinguaSettings validation and defaults
- ServerSettings parsing
- Settings aggregation and the get_settings() singleton
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import LinguaSettings, ServerSettings, Settings
from infrastructure.services.providers import get_settings


@pytest.mark.unit
class TestLinguaSettings:
    """Test suite for LinguaSettings configuration."""

    def test_defaults(self):
        """LinguaSettings uses the documented defaults."""
        lingua = LinguaSettings()

        assert lingua.DEFAULT_LOCALE is None
        assert lingua.RESOURCE_PATH is None
        assert lingua.RESOURCE_EXTENSION == ".json"
        assert lingua.OVERRIDE_KEY_NAME == "language"
        assert lingua.SUBTAG_WEIGHT == 0.1
        assert lingua.COOKIE_MAX_AGE_DAYS == 365
        assert lingua.CONTENT_LANGUAGE_HEADER is True

    def test_custom_values(self, monkeypatch):
        """LinguaSettings reads LINGUA_ prefixed environment variables."""
        monkeypatch.setenv("LINGUA_DEFAULT_LOCALE", "de-de")
        monkeypatch.setenv("LINGUA_RESOURCE_PATH", "/srv/i18n")
        monkeypatch.setenv("LINGUA_RESOURCE_EXTENSION", "yml")
        monkeypatch.setenv("LINGUA_OVERRIDE_KEY_NAME", "lang")
        monkeypatch.setenv("LINGUA_SUBTAG_WEIGHT", "0.2")
        monkeypatch.setenv("LINGUA_CONTENT_LANGUAGE_HEADER", "false")

        lingua = LinguaSettings()

        assert lingua.DEFAULT_LOCALE == "de-de"
        assert lingua.RESOURCE_PATH == "/srv/i18n"
        assert lingua.RESOURCE_EXTENSION == ".yml"
        assert lingua.OVERRIDE_KEY_NAME == "lang"
        assert lingua.SUBTAG_WEIGHT == 0.2
        assert lingua.CONTENT_LANGUAGE_HEADER is False

    @pytest.mark.parametrize("value", ["false", "False", "off", "no", "0"])
    def test_subtag_weight_can_be_disabled(self, monkeypatch, value):
        """False-like values switch subtag promotion off."""
        monkeypatch.setenv("LINGUA_SUBTAG_WEIGHT", value)
        assert LinguaSettings().SUBTAG_WEIGHT == 0

    def test_subtag_weight_false_keyword(self):
        """SUBTAG_WEIGHT=False is accepted as a keyword argument."""
        assert LinguaSettings(SUBTAG_WEIGHT=False).SUBTAG_WEIGHT == 0

    def test_negative_subtag_weight_rejected(self):
        """A negative subtag weight is invalid."""
        with pytest.raises(ValidationError):
            LinguaSettings(SUBTAG_WEIGHT=-0.5)

    def test_cookie_max_age_must_be_positive(self):
        """A non-positive cookie lifetime is invalid."""
        with pytest.raises(ValidationError):
            LinguaSettings(COOKIE_MAX_AGE_DAYS=0)


@pytest.mark.unit
class TestServerSettings:
    """Test suite for ServerSettings configuration."""

    def test_defaults(self):
        """ServerSettings has no CORS origins by default."""
        server = ServerSettings()
        assert server.BACKEND_URL == "http://127.0.0.1:8000"
        assert server.allowed_origins == []

    def test_allowed_origins_from_env(self, monkeypatch):
        """CORS_ALLOW_ORIGINS is split on commas."""
        monkeypatch.setenv(
            "CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,"
        )
        assert ServerSettings().allowed_origins == [
            "https://a.example",
            "https://b.example",
        ]


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_subsettings_instantiated(self):
        """Settings creates every settings section."""
        settings = Settings()
        assert isinstance(settings.lingua, LinguaSettings)
        assert isinstance(settings.server, ServerSettings)

    def test_subsettings_override(self):
        """Explicit sections are used instead of defaults."""
        lingua = LinguaSettings(DEFAULT_LOCALE="fr")
        settings = Settings(lingua=lingua)
        assert settings.lingua.DEFAULT_LOCALE == "fr"

    def test_is_production(self, monkeypatch):
        """is_production is True only without a PREFIX."""
        assert Settings().is_production is True
        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_singleton(self):
        """get_settings() returns the same instance on every call."""
        assert get_settings() is get_settings()
