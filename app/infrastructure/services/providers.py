"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import LinguaService, LocaleResolver, ResourceStore
from infrastructure.i18n.factory import create_locale_resolver, create_resource_store


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_resource_store() -> ResourceStore:
    """
    Get application-scoped resource store singleton.

    Bundles are loaded from LINGUA_RESOURCE_PATH on the first call and never
    reloaded. Call this during startup so configuration problems surface
    before the first request.

    Returns:
        ResourceStore: Cached, read-only resource store.

    Raises:
        ConfigurationError: If the lingua settings are incomplete or the
            bundles cannot be loaded.
    """
    return create_resource_store(get_settings().lingua)


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Returns:
        LocaleResolver: Resolver configured from the lingua settings.
    """
    return create_locale_resolver(get_settings().lingua)


@lru_cache
def get_lingua_service() -> LinguaService:
    """
    Get application-scoped lingua service singleton.

    Returns:
        LinguaService: Service bound to the application store and resolver.

    Usage:
        @router.get("/locales")
        def locales(lingua: LinguaServiceDep):
            return lingua.store.locales
    """
    return LinguaService(store=get_resource_store(), resolver=get_locale_resolver())
