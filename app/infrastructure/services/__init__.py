"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LinguaServiceDep,
    ResourceStoreDep,
    LinguaDep,
    LinguaContentDep,
    get_lingua_bundle,
    get_lingua_content,
    get_lingua_store,
)
from infrastructure.services.providers import (
    get_settings,
    get_resource_store,
    get_locale_resolver,
    get_lingua_service,
)

__all__ = [
    "SettingsDep",
    "LinguaServiceDep",
    "ResourceStoreDep",
    "LinguaDep",
    "LinguaContentDep",
    "get_lingua_bundle",
    "get_lingua_content",
    "get_lingua_store",
    "get_settings",
    "get_resource_store",
    "get_locale_resolver",
    "get_lingua_service",
]
