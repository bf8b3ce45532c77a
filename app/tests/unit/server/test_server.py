"""Unit tests for server.server module."""

import pytest

from infrastructure.configuration import LinguaSettings, Settings
from infrastructure.i18n import ConfigurationError
from infrastructure.services import get_lingua_service, get_settings
from server.lingua_middleware import LinguaMiddleware
from server.server import create_app


@pytest.mark.unit
class TestCreateApp:
    """Tests for create_app()."""

    def test_installs_middleware(self, lingua_service):
        """The app carries the lingua and CORS middleware."""
        app = create_app(settings=Settings(), service=lingua_service)
        classes = [m.cls.__name__ for m in app.user_middleware]
        assert "LinguaMiddleware" in classes
        assert "CORSMiddleware" in classes

    def test_middleware_configured_from_settings(self, lingua_service):
        """Lingua settings are passed to the middleware."""
        settings = Settings(
            lingua=LinguaSettings(OVERRIDE_KEY_NAME="lang", COOKIE_MAX_AGE_DAYS=30)
        )
        app = create_app(settings=settings, service=lingua_service)
        lingua = next(m for m in app.user_middleware if m.cls is LinguaMiddleware)
        assert lingua.kwargs["override_key_name"] == "lang"
        assert lingua.kwargs["cookie_max_age_days"] == 30
        assert lingua.kwargs["service"] is lingua_service

    def test_overrides_dependencies(self, lingua_service):
        """An injected service and settings replace the providers."""
        settings = Settings()
        app = create_app(settings=settings, service=lingua_service)
        assert app.dependency_overrides[get_lingua_service]() is lingua_service
        assert app.dependency_overrides[get_settings]() is settings

    def test_routes_registered(self, lingua_service):
        """The API routes are included."""
        app = create_app(settings=Settings(), service=lingua_service)
        assert app.url_path_for("get_health") == "/health"
        assert app.url_path_for("get_version") == "/version"
        assert app.url_path_for("get_lingua") == "/lingua"
        assert app.url_path_for("get_locales") == "/lingua/locales"

    def test_builds_service_from_given_settings(self, monkeypatch, resources_dir):
        """Without an injected service the store follows the settings argument."""
        monkeypatch.setenv("LINGUA_DEFAULT_LOCALE", "fr")
        settings = Settings(
            lingua=LinguaSettings(
                DEFAULT_LOCALE="de-de",
                RESOURCE_PATH=str(resources_dir),
                OVERRIDE_KEY_NAME="lang",
            )
        )

        app = create_app(settings=settings)

        service = app.dependency_overrides[get_lingua_service]()
        assert service.store.default_locale == "de-de"
        assert service.store.locales == ["de-de", "en"]
        assert service.resolver.default_locale == "de-de"
        lingua = next(m for m in app.user_middleware if m.cls is LinguaMiddleware)
        assert lingua.kwargs["service"] is service

    def test_configuration_error_aborts_startup(self):
        """Without lingua configuration the app cannot be created."""
        with pytest.raises(ConfigurationError):
            create_app(settings=Settings())
