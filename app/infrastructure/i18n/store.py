"""Immutable resource store.

Holds every resource bundle loaded at startup, keyed by locale. The store is
built once, before the first request, and then only read, so it can be
shared between concurrent requests without locking.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

import structlog
from infrastructure.i18n.errors import ConfigurationError
from infrastructure.i18n.models import ResourceBundle

logger = structlog.get_logger().bind(component="i18n.store")


class ResourceStore:
    """Read-only mapping of locale key to ResourceBundle.

    Use ``ResourceStore.build()`` to create one; it validates that the
    default locale has a bundle.

    Attributes:
        default_locale: Locale whose bundle is served when nothing matches.
    """

    def __init__(self, bundles: Mapping[str, ResourceBundle], default_locale: str):
        self._bundles: Mapping[str, ResourceBundle] = MappingProxyType(dict(bundles))
        self.default_locale = default_locale

    @classmethod
    def build(
        cls,
        bundles: Iterable[Tuple[str, Any]],
        default_locale: Optional[str],
    ) -> "ResourceStore":
        """Build a store from already-loaded (locale, content) pairs.

        Later pairs win over earlier ones with the same locale key.

        Args:
            bundles: Loaded (locale key, content tree) pairs.
            default_locale: Locale that must be present in the store.

        Returns:
            The frozen ResourceStore.

        Raises:
            ConfigurationError: If no default locale is given or none of the
                bundles is keyed by it.
        """
        if not default_locale:
            raise ConfigurationError(
                "Please define a default locale for the resource store."
            )

        entries: Dict[str, ResourceBundle] = {}
        for locale, content in bundles:
            if locale in entries:
                logger.warning("duplicate_resource_bundle", locale=locale)
            entries[locale] = ResourceBundle(locale=locale, content=content)

        if default_locale not in entries:
            logger.error(
                "default_locale_bundle_missing",
                default_locale=default_locale,
                available_locales=sorted(entries),
            )
            raise ConfigurationError(
                f"Please create a resource file for your default locale: {default_locale}"
            )

        logger.info(
            "resource_store_built",
            default_locale=default_locale,
            bundle_count=len(entries),
        )
        return cls(entries, default_locale)

    def get(self, locale: str) -> Optional[ResourceBundle]:
        """Return the bundle stored under exactly this key, if any."""
        return self._bundles.get(locale)

    @property
    def default_bundle(self) -> Optional[ResourceBundle]:
        return self._bundles.get(self.default_locale)

    @property
    def locales(self) -> List[str]:
        """Available locale keys, sorted."""
        return sorted(self._bundles)

    def __contains__(self, locale: object) -> bool:
        return locale in self._bundles

    def __len__(self) -> int:
        return len(self._bundles)

    def __iter__(self) -> Iterator[ResourceBundle]:
        return iter(self._bundles.values())
