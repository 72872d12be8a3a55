"""Assembles the OpenAPI envelope and writes it to disk."""

import json
from pathlib import Path

import structlog

from orm_swagger.core.exceptions import FileGenerationError
from orm_swagger.core.settings import GenerationOptions
from orm_swagger.schemas.openapi_schema import (
    ComponentSchema,
    Components,
    Info,
    OpenAPIDocument,
)

logger = structlog.get_logger()

OUTPUT_FILENAME = "swagger.json"


def build_document(
    components: dict[str, ComponentSchema],
    options: GenerationOptions,
) -> OpenAPIDocument:
    """Wrap component schemas in the document envelope. Paths stay empty."""
    return OpenAPIDocument(
        info=Info(
            title=options.title,
            version=options.version,
            description=options.description,
        ),
        servers=list(options.servers),
        paths={},
        components=Components(schemas=components),
    )


def render_document(document: OpenAPIDocument) -> str:
    """Serialize with 2-space indentation, keeping non-ASCII text as is."""
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)


class DocumentWriter:
    """Writes swagger.json into a directory.

    The existence check and the write are not atomic: two concurrent writers
    on the same directory race and the last one wins.
    """

    def __init__(self, output_dir: str | Path) -> None:
        self._output_dir = Path(output_dir)

    @property
    def file_path(self) -> Path:
        """Destination file."""
        return self._output_dir / OUTPUT_FILENAME

    def write(self, document: OpenAPIDocument, overwrite: bool = True) -> Path | None:
        """Persist the document. Returns None when an existing file was kept."""
        file_path = self.file_path
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)

            if file_path.exists() and not overwrite:
                logger.warning(
                    "File already exists, skipping generation as overwrite is disabled",
                    path=str(file_path),
                )
                return None

            file_path.write_text(render_document(document), encoding="utf-8")
        except OSError as exc:
            logger.exception("Error generating Swagger file", path=str(file_path))
            raise FileGenerationError() from exc

        logger.info("Swagger file generated", path=str(file_path))
        return file_path
