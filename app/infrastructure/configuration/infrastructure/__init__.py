"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.lingua import LinguaSettings
from infrastructure.configuration.infrastructure.server import ServerSettings

__all__ = [
    "LinguaSettings",
    "ServerSettings",
]
