"""Application exception classes."""


class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, code: str) -> None:
        self.message = message
        self.code = code
        super().__init__(message)


# --- Construction ---


class ConfigurationError(AppException):
    """Model source is missing or does not expose get_models()."""

    def __init__(self, message: str = "A model source is required") -> None:
        super().__init__(message=message, code="CONFIGURATION_ERROR")


# --- Generation ---


class SchemaGenerationError(AppException):
    """Loading or mapping the model list failed."""

    def __init__(self) -> None:
        super().__init__(
            message="Failed to generate schemas",
            code="SCHEMA_GENERATION_FAILED",
        )


class FileGenerationError(AppException):
    """Creating the output directory or writing the document failed."""

    def __init__(self) -> None:
        super().__init__(
            message="Failed to generate Swagger file",
            code="FILE_GENERATION_FAILED",
        )
