#!/usr/bin/env python3
"""
Main CLI entry point for the Ghibli GraphQL server.
"""

import os
import sys

import click
import uvicorn

from ghibli_graph import __version__
from ghibli_graph.config import settings
from ghibli_graph.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="ghibli-graph")
def cli() -> None:
    """Ghibli Graph CLI - serve the GraphQL facade and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    type=int,
    show_default=True,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--upstream",
    default=None,
    help="Override the upstream REST API base URL",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    upstream: str | None,
    log_level: str,
) -> None:
    """Start the GraphQL API server."""

    configure_logging(debug=(log_level == "debug"), level=log_level)

    logger.info(
        "Starting Ghibli GraphQL server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # Without --reload uvicorn imports the app in this process and reads the shared
    # settings object; with --reload the child process reads the environment
    debug = log_level == "debug"
    settings.log_level = log_level
    settings.debug = debug
    os.environ["GHIBLI_LOG_LEVEL"] = log_level
    os.environ["GHIBLI_DEBUG"] = "true" if debug else "false"
    if upstream:
        os.environ["GHIBLI_API_BASE_URL"] = upstream
        settings.api_base_url = upstream

    try:
        uvicorn.run(
            "ghibli_graph.api.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=reload,
            log_level=log_level,
            access_log=True,
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the SDL to a file instead of stdout",
)
def schema(output: str | None) -> None:
    """Print the GraphQL schema as SDL."""
    from ghibli_graph.graphql.schema import schema as graphql_schema

    sdl = graphql_schema.as_str()
    if output:
        with open(output, "w", encoding="utf-8") as f:
            f.write(sdl + "\n")
        click.echo(f"✓ Schema written to {output}")
    else:
        click.echo(sdl)


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
