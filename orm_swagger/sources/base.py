"""Model source contract and the in-memory implementation."""

from collections.abc import Iterable
from typing import Protocol

from orm_swagger.schemas.descriptor_schema import ModelDescriptor


class ModelSource(Protocol):
    """Anything that can hand over the ORM's model list."""

    async def get_models(self) -> list[ModelDescriptor]: ...


class StaticModelSource:
    """Serves a fixed list of descriptors."""

    def __init__(self, models: Iterable[ModelDescriptor]) -> None:
        self._models = list(models)

    async def get_models(self) -> list[ModelDescriptor]:
        """Return the descriptors in the order they were given."""
        return list(self._models)
