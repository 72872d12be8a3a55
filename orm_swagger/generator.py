"""Swagger document generator built on a model source."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from orm_swagger.core.exceptions import ConfigurationError
from orm_swagger.core.settings import GenerationOptions, resolve_options
from orm_swagger.services.document_service import DocumentWriter, build_document
from orm_swagger.services.schema_service import SchemaService
from orm_swagger.sources.base import ModelSource

DEFAULT_OUTPUT_DIR = "./swagger"


class SwaggerGenerator:
    """Generates swagger.json from the models exposed by a model source.

    Usage:
        generator = SwaggerGenerator(SQLAlchemyModelSource(Base), "./docs")
        await generator.generate({"title": "Shop API", "overwrite": False})
    """

    def __init__(
        self,
        model_source: ModelSource,
        output_dir: str | Path = DEFAULT_OUTPUT_DIR,
    ) -> None:
        if not callable(getattr(model_source, "get_models", None)):
            raise ConfigurationError("A model source with get_models() is required")
        self._schema_service = SchemaService(model_source)
        self._writer = DocumentWriter(output_dir)

    @property
    def file_path(self) -> Path:
        """Where the document is written."""
        return self._writer.file_path

    async def generate(
        self,
        options: GenerationOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Load models, build the document and write it.

        Raises SchemaGenerationError or FileGenerationError.
        """
        resolved = resolve_options(options)
        components = await self._schema_service.generate_schemas()
        document = build_document(components, resolved)
        self._writer.write(document, overwrite=resolved.overwrite)
