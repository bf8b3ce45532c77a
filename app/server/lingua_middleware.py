"""Locale negotiation middleware.

Resolves the resource bundle for every request and persists the chosen
locale in a cookie, so later requests from the same client skip header
negotiation.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from infrastructure.i18n import LinguaService, LocaleSignals
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_OVERRIDE_KEY_NAME = "language"
DEFAULT_COOKIE_MAX_AGE_DAYS = 365


def extract_signals(request: Request, override_key_name: str) -> LocaleSignals:
    """Read the locale signals of a request.

    Args:
        request: Incoming request.
        override_key_name: Name of both the query parameter and the cookie
            carrying an explicit locale.

    Returns:
        LocaleSignals with empty values normalized to None.
    """
    return LocaleSignals(
        query_override=request.query_params.get(override_key_name) or None,
        cookie_override=request.cookies.get(override_key_name) or None,
        accept_language=request.headers.get("accept-language") or None,
    )


def persist_locale(
    response: Response,
    override_key_name: str,
    locale: str,
    max_age_days: int = DEFAULT_COOKIE_MAX_AGE_DAYS,
    now: Optional[datetime] = None,
) -> datetime:
    """Store the resolved locale in the override cookie.

    Returns:
        The cookie expiry.
    """
    expires = (now or datetime.now(timezone.utc)) + timedelta(days=max_age_days)
    response.set_cookie(override_key_name, locale, expires=expires)
    return expires


class LinguaMiddleware(BaseHTTPMiddleware):
    """Attach the negotiated resource bundle to ``request.state``.

    Sets ``request.state.lingua`` (the ResourceBundle) and
    ``request.state.locale`` (its key), writes the locale back as a cookie
    and, if enabled, echoes it in the ``Content-Language`` response header.
    """

    def __init__(
        self,
        app: ASGIApp,
        service: LinguaService,
        override_key_name: str = DEFAULT_OVERRIDE_KEY_NAME,
        cookie_max_age_days: int = DEFAULT_COOKIE_MAX_AGE_DAYS,
        content_language_header: bool = True,
    ):
        super().__init__(app)
        self.service = service
        self.override_key_name = override_key_name
        self.cookie_max_age_days = cookie_max_age_days
        self.content_language_header = content_language_header

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        signals = extract_signals(request, self.override_key_name)
        bundle = self.service.negotiate(signals)
        logger.debug(
            "request_locale_resolved",
            locale=bundle.locale,
            override=signals.override,
            accept_language=signals.accept_language,
        )

        request.state.lingua = bundle
        request.state.locale = bundle.locale

        response = await call_next(request)

        persist_locale(
            response,
            self.override_key_name,
            bundle.locale,
            self.cookie_max_age_days,
        )
        if self.content_language_header:
            response.headers["Content-Language"] = bundle.locale
        return response
