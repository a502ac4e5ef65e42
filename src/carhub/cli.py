#!/usr/bin/env python3
"""
Main CLI entry point for the Carhub services.
"""

import os
import sys

import click
import uvicorn

from carhub import __version__
from carhub.config import get_service_port, settings
from carhub.logging import configure_logging, get_logger

logger = get_logger(__name__)

SERVICE_CHOICE = click.Choice(["cars", "reviews"])


@click.group()
@click.version_option(version=__version__, prog_name="carhub")
def cli() -> None:
    """Carhub CLI - run the car service and the reviews subgraph."""
    pass


@cli.command()
@click.argument("service", type=SERVICE_CHOICE)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (default: CARHUB_API_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind to (default: 8080 for cars, 8081 for reviews)",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    service: str,
    host: str | None,
    port: int | None,
    reload: bool,
    log_level: str,
) -> None:
    """Start the SERVICE API server."""
    host = host or settings.api_host
    port = port or get_service_port(service)

    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Carhub server",
        service=service,
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Reloaded workers re-import the app and read settings from the environment
    if log_level == "debug":
        os.environ["CARHUB_DEBUG"] = "true"
        os.environ["CARHUB_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("CARHUB_DEBUG", "false")
        os.environ.setdefault("CARHUB_LOG_LEVEL", log_level)

    try:
        uvicorn.run(
            f"carhub.api.app:{service}_app",
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", service=service, error=str(e))
        sys.exit(1)


@cli.command("schema")
@click.argument("service", type=SERVICE_CHOICE)
def print_schema(service: str) -> None:
    """Print the GraphQL SDL of SERVICE."""
    from strawberry.printer import print_schema as print_sdl

    from carhub.graphql.schema import get_schema

    click.echo(print_sdl(get_schema(service)))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
