"""
Main FastAPI application for the Ghibli GraphQL facade
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import settings
from ..graphql.schema import create_graphql_router, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..upstream import GhibliClient

# Configure logging before creating logger
configure_logging(debug=settings.debug, level=settings.log_level)
logger = get_logger(__name__)


def create_app(client: GhibliClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        client: Upstream client to use; a default one built from settings otherwise
    """
    ghibli_client = client or GhibliClient()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            "Starting Ghibli GraphQL API...",
            upstream=ghibli_client.base_url,
            environment=settings.environment,
        )

        yield

        logger.info("Shutting down Ghibli GraphQL API...")
        await ghibli_client.aclose()

    app = FastAPI(
        title="Ghibli GraphQL API",
        description="GraphQL facade over the Studio Ghibli REST API",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.ghibli_client = ghibli_client

    app.add_middleware(LoggingContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...")
    validate_schema()

    app.include_router(create_graphql_router(ghibli_client), prefix="")
    logger.info("GraphQL endpoint initialized successfully", endpoint="/graphql")

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "ghibli_graph.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
