"""Server infrastructure settings."""

from typing import List

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        BACKEND_URL: Backend API base URL (default: http://127.0.0.1:8000)
        CORS_ALLOW_ORIGINS: Comma separated list of allowed origins. Empty
            means "*" in production and localhost only in development.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        backend_url = settings.server.BACKEND_URL
        origins = settings.server.allowed_origins
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOW_ORIGINS: str = Field(default="", alias="CORS_ALLOW_ORIGINS")

    @property
    def allowed_origins(self) -> List[str]:
        """Configured CORS origins, empty if none are set."""
        return [
            origin.strip()
            for origin in self.CORS_ALLOW_ORIGINS.split(",")
            if origin.strip()
        ]
