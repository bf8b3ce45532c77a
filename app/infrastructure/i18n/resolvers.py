"""Locale resolution logic for determining the user's preferred language.

Merges the override signals of a request (query parameter, cookie) with the
negotiated Accept-Language tags into one ranked candidate list.
"""

from typing import List, Optional, Union

import structlog
from infrastructure.i18n.models import LocaleSignals
from infrastructure.i18n.negotiator import DEFAULT_SUBTAG_WEIGHT, LanguageNegotiator

logger = structlog.get_logger().bind(component="i18n.resolver")


class LocaleResolver:
    """Computes the ranked candidate locales for a request.

    Precedence:
    1. Explicit override (query parameter, then cookie)
    2. Accept-Language header
    3. Default locale

    Whether the override names an existing bundle is not checked here; the
    lookup falls back to the default bundle when it does not.
    """

    def __init__(
        self,
        default_locale: str,
        subtag_weight: Union[float, bool, None] = DEFAULT_SUBTAG_WEIGHT,
    ):
        """Initialize locale resolver.

        Args:
            default_locale: Candidate used when the request carries no signal.
            subtag_weight: Weight of promoted primary subtags, falsy to
                disable promotion.
        """
        self.default_locale = default_locale
        self.subtag_weight = subtag_weight
        self.log = logger.bind(default_locale=default_locale)

    def resolve(
        self,
        override: Optional[str],
        accept_language: Optional[str],
    ) -> List[str]:
        """Resolve candidate locales, most preferred first.

        Args:
            override: Explicit locale selection, if any.
            accept_language: Accept-Language header value, if any.

        Returns:
            Never-empty list of candidate locales.
        """
        if override:
            self.log.debug("locale_resolved_from_override", locale=override)
            return [override]

        if accept_language:
            candidates = LanguageNegotiator.rank(accept_language, self.subtag_weight)
            if candidates:
                self.log.debug("locale_resolved_from_header", candidates=candidates)
                return candidates

        self.log.debug("locale_resolved_from_default")
        return [self.default_locale]

    def resolve_signals(self, signals: LocaleSignals) -> List[str]:
        """Resolve candidate locales from the signals of a request."""
        return self.resolve(signals.override, signals.accept_language)
