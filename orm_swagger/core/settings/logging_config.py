"""Logging configuration."""

from typing import Literal

from pydantic import BaseModel


class LoggingConfig(BaseModel, frozen=True):
    """Logging settings."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"]
    json_output: bool

    @property
    def level_number(self) -> int:
        """Numeric stdlib logging level."""
        return {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}[self.level]
