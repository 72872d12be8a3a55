"""Options controlling the generated document and how it is written."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from orm_swagger.core.settings.server_config import ServerConfig


class GenerationOptions(BaseModel, frozen=True):
    """Per-call generation options.

    Every field has a default, so a partial mapping is enough to build one.
    """

    title: str = "API Documentation"
    version: str = "1.0.0"
    description: str = "Generated API documentation"
    servers: tuple[ServerConfig, ...] = Field(default_factory=tuple)
    overwrite: bool = True


DEFAULT_OPTIONS = GenerationOptions()


def resolve_options(
    options: GenerationOptions | Mapping[str, Any] | None = None,
) -> GenerationOptions:
    """Merge partial options over DEFAULT_OPTIONS.

    Unrecognized keys are ignored. Keys explicitly set to None keep the default.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, GenerationOptions):
        return options

    overrides = {
        key: value
        for key, value in options.items()
        if key in GenerationOptions.model_fields and value is not None
    }
    merged = DEFAULT_OPTIONS.model_dump()
    merged.update(overrides)
    return GenerationOptions.model_validate(merged)
