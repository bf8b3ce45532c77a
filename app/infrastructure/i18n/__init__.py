"""i18n system - locale negotiation and resource resolution.

Picks, for every request, the resource bundle to serve from an explicit
override (query parameter or cookie), the Accept-Language header and the
default locale.

Main components:
- models: ResourceBundle, LanguageTags, LocaleSignals
- negotiator: LanguageNegotiator for Accept-Language ranking
- store: ResourceStore, the immutable locale -> bundle mapping
- resolvers: LocaleResolver for the override/header/default precedence
- lookup: resolve_bundle with the default bundle fallback
- loader: BundleLoader and FileBundleLoader
- service: LinguaService facade
"""

from infrastructure.i18n.errors import (
    ConfigurationError,
    LinguaError,
    ResourceStoreCorruptedError,
)
from infrastructure.i18n.loader import BundleLoader, FileBundleLoader
from infrastructure.i18n.lookup import resolve_bundle
from infrastructure.i18n.models import LanguageTags, LocaleSignals, ResourceBundle
from infrastructure.i18n.negotiator import LanguageNegotiator
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import LinguaService
from infrastructure.i18n.store import ResourceStore

__all__ = [
    "ResourceBundle",
    "LanguageTags",
    "LocaleSignals",
    "LanguageNegotiator",
    "ResourceStore",
    "LocaleResolver",
    "resolve_bundle",
    "BundleLoader",
    "FileBundleLoader",
    "LinguaService",
    "LinguaError",
    "ConfigurationError",
    "ResourceStoreCorruptedError",
]
