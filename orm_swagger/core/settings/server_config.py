"""OpenAPI server entry configuration."""

from pydantic import BaseModel


class ServerConfig(BaseModel, frozen=True):
    """A server URL advertised in the generated document."""

    url: str
    description: str | None = None
