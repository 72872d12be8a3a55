"""structlog setup for command-line runs."""

import structlog

from orm_swagger.core.settings import LoggingConfig


def configure_logging(config: LoggingConfig) -> None:
    """Configure structlog processors and the minimum level."""
    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if config.json_output:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(config.level_number),
        cache_logger_on_first_use=True,
    )
