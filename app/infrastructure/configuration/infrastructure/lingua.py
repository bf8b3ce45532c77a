"""Lingua i18n infrastructure settings."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import InfrastructureSettings

_DISABLED_VALUES = {"false", "off", "no", "none", ""}


class LinguaSettings(InfrastructureSettings):
    """Locale negotiation and resource bundle configuration.

    DEFAULT_LOCALE and RESOURCE_PATH are required to serve requests, but are
    only enforced when the resource store is built, so the settings object
    itself can always be loaded.

    Environment Variables:
        LINGUA_DEFAULT_LOCALE: Locale served when nothing else matches
        LINGUA_RESOURCE_PATH: Directory containing one bundle file per locale
        LINGUA_RESOURCE_EXTENSION: Bundle file extension (default: .json)
        LINGUA_OVERRIDE_KEY_NAME: Query parameter and cookie name carrying an
            explicit locale (default: language)
        LINGUA_SUBTAG_WEIGHT: Weight of promoted primary subtags, false or 0
            disables promotion (default: 0.1)
        LINGUA_COOKIE_MAX_AGE_DAYS: Lifetime of the override cookie
            (default: 365)
        LINGUA_CONTENT_LANGUAGE_HEADER: Echo the resolved locale in the
            Content-Language response header (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_locale = settings.lingua.DEFAULT_LOCALE
        cookie_name = settings.lingua.OVERRIDE_KEY_NAME
        ```
    """

    model_config = SettingsConfigDict(env_prefix="LINGUA_")

    DEFAULT_LOCALE: Optional[str] = Field(
        default=None,
        description="Locale whose bundle is served when nothing else matches",
    )

    RESOURCE_PATH: Optional[str] = Field(
        default=None,
        description="Directory containing the resource bundle files",
    )

    RESOURCE_EXTENSION: str = Field(
        default=".json",
        description="Extension stripped from bundle file names to get locale keys",
    )

    OVERRIDE_KEY_NAME: str = Field(
        default="language",
        description="Query parameter and cookie name for an explicit locale",
    )

    SUBTAG_WEIGHT: float = Field(
        default=0.1,
        ge=0,
        description="Weight of promoted primary subtags, 0 disables promotion",
    )

    COOKIE_MAX_AGE_DAYS: int = Field(
        default=365,
        gt=0,
        description="Lifetime of the override cookie in days",
    )

    CONTENT_LANGUAGE_HEADER: bool = Field(
        default=True,
        description="Echo the resolved locale in the Content-Language header",
    )

    @field_validator("SUBTAG_WEIGHT", mode="before")
    @classmethod
    def validate_subtag_weight(cls, v: Any) -> Any:
        """Map false-like values to 0 so promotion can be switched off."""
        if v is None or v is False:
            return 0.0
        if isinstance(v, str) and v.strip().lower() in _DISABLED_VALUES:
            return 0.0
        return v

    @field_validator("RESOURCE_EXTENSION")
    @classmethod
    def validate_resource_extension(cls, v: str) -> str:
        """Ensure the extension starts with a dot."""
        return v if v.startswith(".") else f".{v}"
