"""Resource lookup with a guaranteed fallback to the default bundle."""

from typing import Iterable, Optional

import structlog
from infrastructure.i18n.errors import ResourceStoreCorruptedError
from infrastructure.i18n.models import ResourceBundle
from infrastructure.i18n.store import ResourceStore

logger = structlog.get_logger().bind(component="i18n.lookup")


def resolve_bundle(
    candidates: Iterable[str],
    store: ResourceStore,
    default_locale: Optional[str] = None,
) -> ResourceBundle:
    """Return the bundle of the first candidate found in the store.

    Candidates are matched by exact key. Empty candidates never match. When
    no candidate matches, the default locale's bundle is returned.

    Args:
        candidates: Ranked candidate locales, most preferred first.
        store: Store to look the candidates up in.
        default_locale: Fallback locale, defaults to the store's own.

    Returns:
        The resolved ResourceBundle.

    Raises:
        ResourceStoreCorruptedError: If the default bundle is missing from
            the store.
    """
    for candidate in candidates:
        if not candidate:
            continue
        bundle = store.get(candidate)
        if bundle is not None:
            return bundle

    fallback = default_locale or store.default_locale
    bundle = store.get(fallback)
    if bundle is None:
        logger.critical("default_bundle_missing_from_store", default_locale=fallback)
        raise ResourceStoreCorruptedError(
            f"Resource store has no bundle for default locale: {fallback}"
        )

    logger.debug("bundle_fallback_to_default", default_locale=fallback)
    return bundle
