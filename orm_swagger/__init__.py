"""Generate OpenAPI component schemas from ORM models."""

from orm_swagger.core.exceptions import (
    AppException,
    ConfigurationError,
    FileGenerationError,
    SchemaGenerationError,
)
from orm_swagger.core.settings import GenerationOptions, ServerConfig
from orm_swagger.generator import SwaggerGenerator
from orm_swagger.schemas.descriptor_schema import FieldDescriptor, ModelDescriptor
from orm_swagger.sources.base import ModelSource, StaticModelSource
from orm_swagger.sources.sqlalchemy_source import SQLAlchemyModelSource

__all__ = [
    "AppException",
    "ConfigurationError",
    "FieldDescriptor",
    "FileGenerationError",
    "GenerationOptions",
    "ModelDescriptor",
    "ModelSource",
    "SQLAlchemyModelSource",
    "SchemaGenerationError",
    "ServerConfig",
    "StaticModelSource",
    "SwaggerGenerator",
]
