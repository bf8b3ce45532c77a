"""Lingua service for dependency injection.

Provides a class-based interface to the i18n system that ties the locale
resolver and the resource store together.
"""

from typing import List, Optional

from infrastructure.i18n.lookup import resolve_bundle
from infrastructure.i18n.models import LocaleSignals, ResourceBundle
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.store import ResourceStore


class LinguaService:
    """Resolves the resource bundle to serve for a request.

    Thin facade over LocaleResolver and resolve_bundle. Holds no per-request
    state, so one instance is shared by all requests.

    Usage:
        service = LinguaService(store=store, resolver=resolver)
        bundle = service.negotiate(
            LocaleSignals(cookie_override="de-de", accept_language="en")
        )
        bundle.locale  # "de-de"
    """

    def __init__(
        self,
        store: ResourceStore,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize lingua service.

        Args:
            store: Built resource store.
            resolver: Optional resolver. Defaults to one using the store's
                default locale and the default subtag weight.
        """
        self._store = store
        self._resolver = resolver or LocaleResolver(default_locale=store.default_locale)

    @property
    def store(self) -> ResourceStore:
        return self._store

    @property
    def resolver(self) -> LocaleResolver:
        return self._resolver

    def candidates(self, signals: LocaleSignals) -> List[str]:
        """Ranked candidate locales for the given request signals."""
        return self._resolver.resolve_signals(signals)

    def negotiate(self, signals: LocaleSignals) -> ResourceBundle:
        """Resolve the bundle to serve for the given request signals.

        Args:
            signals: Override and header signals of the request.

        Returns:
            The first matching bundle, or the default locale's bundle.
        """
        return resolve_bundle(
            self.candidates(signals),
            self._store,
            self._resolver.default_locale,
        )
