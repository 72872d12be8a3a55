"""Application configuration using Pydantic Settings V2."""

from functools import cached_property
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from orm_swagger.core.settings import GenerationOptions, LoggingConfig


class Settings(BaseSettings):
    """Generator settings loaded from SWAGGER_* environment variables.

    Flat fields are loaded directly from the environment.
    Domain properties provide grouped access (e.g. settings.document.title).
    """

    model_config = SettingsConfigDict(
        env_prefix="SWAGGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output
    output_dir: Path = Field(
        default=Path("./swagger"),
        description="Directory that receives swagger.json",
    )

    # Document
    title: str = Field(
        default="API Documentation",
        description="info.title of the generated document",
    )
    version: str = Field(
        default="1.0.0",
        description="info.version of the generated document",
    )
    description: str = Field(
        default="Generated API documentation",
        description="info.description of the generated document",
    )
    overwrite: bool = Field(
        default=True,
        description="Replace an existing swagger.json",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Minimum log level",
    )
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console output",
    )

    # --- Domain properties ---

    @cached_property
    def document(self) -> GenerationOptions:
        """Document generation options."""
        return GenerationOptions(
            title=self.title,
            version=self.version,
            description=self.description,
            overwrite=self.overwrite,
        )

    @cached_property
    def logging(self) -> LoggingConfig:
        """Logging configuration."""
        return LoggingConfig(level=self.log_level, json_output=self.log_json)


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
