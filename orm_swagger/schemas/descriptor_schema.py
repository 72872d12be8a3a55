"""Model and field descriptors handed over by a model source."""

from typing import Literal

from pydantic import BaseModel, Field

FieldKind = Literal["scalar", "enum", "object"]


class FieldDescriptor(BaseModel, frozen=True):
    """A single field of an ORM model.

    ``type`` is a scalar type name for scalar fields, the enum name for enum
    fields and the target model name for relation (``object``) fields.
    """

    name: str
    type: str
    kind: FieldKind = "scalar"
    is_required: bool = False
    enum_values: tuple[str, ...] | None = None


class ModelDescriptor(BaseModel, frozen=True):
    """An ORM model with its fields in declaration order."""

    name: str
    fields: tuple[FieldDescriptor, ...] = Field(default_factory=tuple)
