"""Maps model descriptors to OpenAPI component schemas."""

from collections.abc import Iterable

import structlog

from orm_swagger.core.exceptions import SchemaGenerationError
from orm_swagger.schemas.descriptor_schema import FieldDescriptor, ModelDescriptor
from orm_swagger.schemas.openapi_schema import ComponentSchema, PropertySchema
from orm_swagger.sources.base import ModelSource

logger = structlog.get_logger()

REF_PREFIX = "#/components/schemas/"

SCALAR_TYPE_MAP: dict[str, PropertySchema] = {
    "String": {"type": "string"},
    "Int": {"type": "integer"},
    "Float": {"type": "number"},
    "Boolean": {"type": "boolean"},
    "DateTime": {"type": "string", "format": "date-time"},
    "Json": {"type": "object"},
}

FALLBACK_SCHEMA: PropertySchema = {"type": "string"}


def map_field(field: FieldDescriptor) -> PropertySchema:
    """Return the OpenAPI property schema for one field.

    Enums and relations win over the scalar table. Scalar names missing from
    the table map to a plain string.
    """
    if field.kind == "enum":
        return {"type": "string", "enum": list(field.enum_values or [])}
    if field.kind == "object":
        return {"$ref": f"{REF_PREFIX}{field.type}"}

    schema = SCALAR_TYPE_MAP.get(field.type)
    if schema is None:
        logger.debug(
            "Unknown scalar type, falling back to string",
            field=field.name,
            type=field.type,
        )
        schema = FALLBACK_SCHEMA
    return dict(schema)


def build_component_schema(model: ModelDescriptor) -> ComponentSchema:
    """Object schema for one model, in field declaration order."""
    schema = ComponentSchema()
    for field in model.fields:
        schema.properties[field.name] = map_field(field)
        if field.is_required:
            schema.required.append(field.name)
    return schema


def build_component_schemas(
    models: Iterable[ModelDescriptor],
) -> dict[str, ComponentSchema]:
    """Component schema map keyed by model name."""
    return {model.name: build_component_schema(model) for model in models}


class SchemaService:
    """Loads models from a source and maps them to component schemas."""

    def __init__(self, source: ModelSource) -> None:
        self._source = source

    async def generate_schemas(self) -> dict[str, ComponentSchema]:
        """Build the full component map, or raise SchemaGenerationError."""
        try:
            models = await self._source.get_models()
            components = build_component_schemas(models)
        except Exception as exc:
            logger.exception("Error generating schemas")
            raise SchemaGenerationError() from exc

        logger.info("Schemas generated", model_count=len(components))
        return components
