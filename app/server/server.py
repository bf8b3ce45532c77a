from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from infrastructure.configuration import Settings
from infrastructure.i18n import LinguaService
from infrastructure.i18n.factory import create_locale_resolver, create_resource_store
from infrastructure.logging import (
    bind_request_context,
    get_correlation_id,
    get_module_logger,
)
from infrastructure.services.providers import get_lingua_service, get_settings
from server.lingua_middleware import LinguaMiddleware

logger = get_module_logger()


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[LinguaService] = None,
) -> FastAPI:
    """Build the FastAPI application.

    The resource store is loaded here, before the application can serve
    anything, so a ConfigurationError aborts startup.

    Args:
        settings: Optional settings, defaults to the application singleton.
        service: Optional pre-built lingua service, defaults to one built
            from ``settings.lingua``.

    Raises:
        ConfigurationError: If the resource store cannot be built.
    """
    settings = settings or get_settings()
    handler = FastAPI()

    if service is None:
        service = LinguaService(
            store=create_resource_store(settings.lingua),
            resolver=create_locale_resolver(settings.lingua),
        )
    handler.dependency_overrides[get_lingua_service] = lambda: service
    handler.dependency_overrides[get_settings] = lambda: settings

    handler.add_middleware(
        LinguaMiddleware,
        service=service,
        override_key_name=settings.lingua.OVERRIDE_KEY_NAME,
        cookie_max_age_days=settings.lingua.COOKIE_MAX_AGE_DAYS,
        content_language_header=settings.lingua.CONTENT_LANGUAGE_HEADER,
    )

    @handler.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
            response.headers["X-Correlation-ID"] = get_correlation_id()
        return response

    allow_origins = settings.server.allowed_origins or (
        ["*"]
        if settings.is_production
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    handler.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    handler.include_router(api_router)

    logger.info(
        "application_created",
        default_locale=service.store.default_locale,
        locales=service.store.locales,
    )
    return handler
