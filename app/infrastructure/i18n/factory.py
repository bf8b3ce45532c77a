"""Factory functions for creating i18n components.

Provides convenience functions for building the resource store and locale
resolver from application settings.
"""

from typing import Optional

import structlog
from infrastructure.configuration.infrastructure.lingua import LinguaSettings
from infrastructure.i18n.errors import ConfigurationError
from infrastructure.i18n.loader import BundleLoader, FileBundleLoader
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import ResourceStore

logger = structlog.get_logger()


def create_resource_store(
    lingua_settings: LinguaSettings,
    loader: Optional[BundleLoader] = None,
) -> ResourceStore:
    """Load all bundles and build the resource store.

    Args:
        lingua_settings: Lingua configuration section.
        loader: Optional loader, defaults to a FileBundleLoader reading
            LINGUA_RESOURCE_PATH.

    Returns:
        ResourceStore: Frozen store containing the default locale bundle.

    Raises:
        ConfigurationError: If the default locale or resource path is not
            configured, or if loading or validation fails.

    Usage:
        store = create_resource_store(settings.lingua)
        bundle = store.get("de-de")
    """
    if not lingua_settings.DEFAULT_LOCALE:
        raise ConfigurationError(
            "Please define a default locale (LINGUA_DEFAULT_LOCALE)."
        )

    if loader is None:
        if not lingua_settings.RESOURCE_PATH:
            raise ConfigurationError(
                "Please define a path where lingua can find your locales "
                "(LINGUA_RESOURCE_PATH)."
            )
        loader = FileBundleLoader(
            resource_path=lingua_settings.RESOURCE_PATH,
            extension=lingua_settings.RESOURCE_EXTENSION,
        )

    store = ResourceStore.build(loader.load_bundles(), lingua_settings.DEFAULT_LOCALE)
    logger.info(
        "resource_store_created",
        default_locale=store.default_locale,
        locales=store.locales,
    )
    return store


def create_locale_resolver(lingua_settings: LinguaSettings) -> LocaleResolver:
    """Create a LocaleResolver configured from settings.

    Raises:
        ConfigurationError: If no default locale is configured.
    """
    if not lingua_settings.DEFAULT_LOCALE:
        raise ConfigurationError(
            "Please define a default locale (LINGUA_DEFAULT_LOCALE)."
        )
    return LocaleResolver(
        default_locale=lingua_settings.DEFAULT_LOCALE,
        subtag_weight=lingua_settings.SUBTAG_WEIGHT,
    )
