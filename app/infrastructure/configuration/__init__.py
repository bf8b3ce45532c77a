"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the lingua
application using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    LinguaSettings: Locale negotiation settings class
    ServerSettings: HTTP server settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    default_locale = settings.lingua.DEFAULT_LOCALE
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure import LinguaSettings, ServerSettings

__all__ = ["Settings", "LinguaSettings", "ServerSettings"]
