"""Domain-specific configuration models."""

from orm_swagger.core.settings.document_config import (
    DEFAULT_OPTIONS,
    GenerationOptions,
    resolve_options,
)
from orm_swagger.core.settings.logging_config import LoggingConfig
from orm_swagger.core.settings.server_config import ServerConfig

__all__ = [
    "DEFAULT_OPTIONS",
    "GenerationOptions",
    "LoggingConfig",
    "ServerConfig",
    "resolve_options",
]
