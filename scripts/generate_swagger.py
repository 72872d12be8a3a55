"""Generate swagger.json from a SQLAlchemy declarative base.

Usage:
    python -m scripts.generate_swagger --base app.models:Base --output ./docs
"""

import argparse
import asyncio
import importlib
from typing import Any

from orm_swagger.core.config import get_settings
from orm_swagger.core.logging import configure_logging
from orm_swagger.core.settings import GenerationOptions, ServerConfig
from orm_swagger.generator import SwaggerGenerator
from orm_swagger.sources.sqlalchemy_source import SQLAlchemyModelSource


def load_object(path: str) -> Any:
    """Import ``package.module:attribute``."""
    module_name, _, attribute = path.partition(":")
    if not attribute:
        raise argparse.ArgumentTypeError(f"Expected module:attribute, got '{path}'")
    try:
        return getattr(importlib.import_module(module_name), attribute)
    except (ImportError, AttributeError) as exc:
        raise argparse.ArgumentTypeError(f"Cannot load '{path}': {exc}") from exc


def parse_server(value: str) -> ServerConfig:
    """Parse ``URL[=DESCRIPTION]``; the first '=' separates the two."""
    url, _, description = value.partition("=")
    if not url:
        raise argparse.ArgumentTypeError(f"Server URL missing in '{value}'")
    return ServerConfig(url=url, description=description or None)


def main() -> None:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Generate swagger.json from ORM models")
    parser.add_argument(
        "--base",
        required=True,
        type=load_object,
        help="Declarative base as module:attribute",
    )
    parser.add_argument(
        "--output", default=str(settings.output_dir), help="Output directory"
    )
    parser.add_argument("--title", default=settings.document.title, help="API title")
    parser.add_argument(
        "--version", default=settings.document.version, help="API version"
    )
    parser.add_argument(
        "--description",
        default=settings.document.description,
        help="API description",
    )
    parser.add_argument(
        "--server",
        action="append",
        default=[],
        type=parse_server,
        metavar="URL[=DESCRIPTION]",
        help="Server URL with optional description (repeatable)",
    )
    parser.add_argument(
        "--no-overwrite",
        dest="overwrite",
        action="store_false",
        default=settings.document.overwrite,
        help="Keep an existing swagger.json",
    )
    args = parser.parse_args()

    configure_logging(settings.logging)

    options = GenerationOptions(
        title=args.title,
        version=args.version,
        description=args.description,
        servers=tuple(args.server),
        overwrite=args.overwrite,
    )
    generator = SwaggerGenerator(SQLAlchemyModelSource(args.base), args.output)
    asyncio.run(generator.generate(options))


if __name__ == "__main__":
    main()
