"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from ..config import settings
from ..logging import get_logger
from ..upstream import GhibliClient
from .queries.root import Query

logger = get_logger(__name__)

# Field names are exposed exactly as upstream spells them (release_date, eye_color, ...)
schema = strawberry.Schema(
    query=Query,
    config=StrawberryConfig(auto_camel_case=False),
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved lazy type references early so the server fails fast
    instead of erroring on the first request.

    Raises:
        RuntimeError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        error_messages = [str(e) for e in errors]
        logger.error("GraphQL schema validation failed", errors=error_messages)
        raise RuntimeError(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        error_messages = [str(e) for e in result.errors]
        logger.error("GraphQL introspection failed", errors=error_messages)
        raise RuntimeError(f"GraphQL introspection failed: {'; '.join(error_messages)}")

    logger.info("GraphQL schema validation successful")


def create_graphql_router(client: GhibliClient) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    Args:
        client: Upstream client shared by every request's resolvers
    """

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
            "ghibli": client,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
