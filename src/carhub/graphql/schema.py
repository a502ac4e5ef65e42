"""
GraphQL schema definitions using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from ..reviews.source import InMemoryReviewSource, ReviewSource
from .queries.cars import CarQuery
from .queries.reviews import ReviewsQuery
from .resolvers.review import REVIEW_SOURCE_KEY
from .types.review import Product

logger = get_logger(__name__)

SERVICES = ("cars", "reviews")


class SchemaValidationError(Exception):
    """Raised when a GraphQL schema fails validation at startup."""


car_schema = strawberry.Schema(query=CarQuery)

reviews_schema = strawberry.federation.Schema(
    query=ReviewsQuery,
    types=[Product],
)


def get_schema(service: str) -> strawberry.Schema:
    """Get the schema served by a service."""
    if service == "cars":
        return car_schema
    if service == "reviews":
        return reviews_schema
    raise ValueError(f"Unknown service: {service!r} (expected one of {', '.join(SERVICES)})")


def validate_schema(service: str) -> None:
    """Validate a service's GraphQL schema at startup.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    graphql_schema = get_schema(service)._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", service=service, error=message)
        raise SchemaValidationError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", service=service, error=message)
        raise SchemaValidationError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful", service=service)


def create_graphql_router(
    service: str, review_source: ReviewSource | None = None
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI.

    The reviews subgraph resolves reviews through ``review_source``, which
    defaults to the in-memory mock source.
    """
    schema = get_schema(service)
    if service == "reviews" and review_source is None:
        review_source = InMemoryReviewSource()

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        context: dict[str, Any] = {"request": request}
        if review_source is not None:
            context[REVIEW_SOURCE_KEY] = review_source
        return context

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if settings.graphiql else None,
        context_getter=get_context,
    )
