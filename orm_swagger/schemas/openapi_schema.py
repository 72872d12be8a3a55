"""OpenAPI document envelope."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from orm_swagger.core.settings import ServerConfig

PropertySchema = dict[str, Any]


class ComponentSchema(BaseModel):
    """Object schema generated for one model."""

    type: Literal["object"] = "object"
    properties: dict[str, PropertySchema] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class Info(BaseModel):
    """Document info block."""

    title: str
    version: str
    description: str


class Components(BaseModel):
    """Reusable component schemas keyed by model name."""

    schemas: dict[str, ComponentSchema] = Field(default_factory=dict)


class OpenAPIDocument(BaseModel):
    """Top-level document. Field order is the serialized key order."""

    openapi: Literal["3.0.0"] = "3.0.0"
    info: Info
    servers: list[ServerConfig] = Field(default_factory=list)
    paths: dict[str, Any] = Field(default_factory=dict)
    components: Components = Field(default_factory=Components)

    def to_dict(self) -> dict[str, Any]:
        """Plain dict ready for JSON; unset server descriptions are dropped."""
        return self.model_dump(exclude_none=True)
