"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated, Any

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.i18n import LinguaService, ResourceBundle, ResourceStore
from infrastructure.services.providers import get_lingua_service, get_settings


def get_lingua_bundle(request: Request) -> ResourceBundle:
    """
    Get the resource bundle resolved for the current request.

    Set by LinguaMiddleware; it is the view-helper equivalent for handlers.

    Raises:
        RuntimeError: If LinguaMiddleware is not installed.
    """
    bundle = getattr(request.state, "lingua", None)
    if bundle is None:
        raise RuntimeError("LinguaMiddleware is not installed on this application")
    return bundle


def get_lingua_store(
    lingua: Annotated[LinguaService, Depends(get_lingua_service)],
) -> ResourceStore:
    """Get the resource store of the active lingua service."""
    return lingua.store


def get_lingua_content(
    bundle: Annotated[ResourceBundle, Depends(get_lingua_bundle)],
) -> Any:
    """Get the content tree of the bundle resolved for the current request."""
    return bundle.content


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Lingua service (resource store + locale resolver)
LinguaServiceDep = Annotated[LinguaService, Depends(get_lingua_service)]
ResourceStoreDep = Annotated[ResourceStore, Depends(get_lingua_store)]

# Request-scoped resolved bundle and its content
LinguaDep = Annotated[ResourceBundle, Depends(get_lingua_bundle)]
LinguaContentDep = Annotated[Any, Depends(get_lingua_content)]

__all__ = [
    "SettingsDep",
    "LinguaServiceDep",
    "ResourceStoreDep",
    "LinguaDep",
    "LinguaContentDep",
    "get_lingua_bundle",
    "get_lingua_content",
    "get_lingua_store",
]
