"""Model source backed by a SQLAlchemy declarative registry."""

from typing import Any

import structlog
from sqlalchemy import JSON, Boolean, Column, DateTime, Enum, Float, Integer, String
from sqlalchemy.orm import (
    ColumnProperty,
    Mapper,
    RelationshipDirection,
    RelationshipProperty,
    registry,
)
from sqlalchemy.types import TypeEngine

from orm_swagger.core.exceptions import ConfigurationError
from orm_swagger.schemas.descriptor_schema import FieldDescriptor, ModelDescriptor

logger = structlog.get_logger()

# Checked in order: Float before anything Numeric, Enum handled separately.
SCALAR_TYPE_NAMES: tuple[tuple[type[TypeEngine[Any]], str], ...] = (
    (Boolean, "Boolean"),
    (Integer, "Int"),
    (Float, "Float"),
    (DateTime, "DateTime"),
    (JSON, "Json"),
    (String, "String"),
)


def scalar_type_name(column_type: TypeEngine[Any]) -> str:
    """Name a column type the way the schema mapper's scalar table expects."""
    for sa_type, name in SCALAR_TYPE_NAMES:
        if isinstance(column_type, sa_type):
            return name
    return type(column_type).__name__


class SQLAlchemyModelSource:
    """Builds descriptors from every class mapped on a declarative base."""

    def __init__(self, base: Any) -> None:
        mapper_registry = getattr(base, "registry", base)
        if not isinstance(mapper_registry, registry):
            raise ConfigurationError(
                "A SQLAlchemy declarative base or registry is required"
            )
        self._registry = mapper_registry

    async def get_models(self) -> list[ModelDescriptor]:
        """Describe all mapped classes, ordered by class name.

        Class names become component names, so two mapped classes sharing a
        name raise ConfigurationError.
        """
        self._registry.configure()
        mappers = sorted(
            self._registry.mappers,
            key=lambda m: (m.class_.__name__, m.class_.__module__),
        )
        self._check_unique_names(mappers)
        models = [self._describe_mapper(mapper) for mapper in mappers]
        logger.debug("Introspected SQLAlchemy models", model_count=len(models))
        return models

    @staticmethod
    def _check_unique_names(mappers: list[Mapper[Any]]) -> None:
        seen: dict[str, str] = {}
        for mapper in mappers:
            name = mapper.class_.__name__
            module = mapper.class_.__module__
            if name in seen:
                raise ConfigurationError(
                    f"Duplicate model name '{name}' in modules"
                    f" '{seen[name]}' and '{module}'"
                )
            seen[name] = module

    def _describe_mapper(self, mapper: Mapper[Any]) -> ModelDescriptor:
        fields = [self._describe_column(prop) for prop in mapper.column_attrs]
        fields += [self._describe_relationship(rel) for rel in mapper.relationships]
        return ModelDescriptor(name=mapper.class_.__name__, fields=tuple(fields))

    @staticmethod
    def _describe_column(prop: ColumnProperty[Any]) -> FieldDescriptor:
        column = prop.columns[0]
        column_type = column.type
        # Expression properties (column_property over a SQL expression) are
        # never required.
        is_required = isinstance(column, Column) and not column.nullable

        if isinstance(column_type, Enum):
            enum_name = column_type.name
            if enum_name is None and column_type.enum_class is not None:
                enum_name = column_type.enum_class.__name__
            return FieldDescriptor(
                name=prop.key,
                type=enum_name or "Enum",
                kind="enum",
                is_required=is_required,
                enum_values=tuple(column_type.enums),
            )

        return FieldDescriptor(
            name=prop.key,
            type=scalar_type_name(column_type),
            kind="scalar",
            is_required=is_required,
        )

    @staticmethod
    def _describe_relationship(rel: RelationshipProperty[Any]) -> FieldDescriptor:
        if rel.uselist:
            is_required = True
        else:
            is_required = rel.direction is RelationshipDirection.MANYTOONE and all(
                not column.nullable for column in rel.local_columns
            )
        return FieldDescriptor(
            name=rel.key,
            type=rel.mapper.class_.__name__,
            kind="object",
            is_required=is_required,
        )
