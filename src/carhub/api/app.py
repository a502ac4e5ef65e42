"""
FastAPI applications for the car service and the reviews subgraph
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import get_service_port, settings
from ..graphql.schema import create_graphql_router, get_schema, validate_schema
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..reviews.source import ReviewSource

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)

DESCRIPTIONS = {
    "cars": "Car lookup service backed by mock data",
    "reviews": "Reviews federation subgraph",
}


def create_app(service: str = "cars", review_source: ReviewSource | None = None) -> FastAPI:
    """Create and configure the FastAPI application for a service.

    Args:
        service: Either ``"cars"`` or ``"reviews"``
        review_source: Review source injected into the reviews subgraph

    Raises:
        ValueError: If the service name is unknown
    """
    get_schema(service)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan manager."""
        logger.info("Starting service", service=service, environment=settings.environment)
        yield
        logger.info("Shutting down service", service=service)

    app = FastAPI(
        title=f"Carhub {service} API",
        description=DESCRIPTIONS[service],
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    app.add_middleware(LoggingContextMiddleware, service=service)

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
        return {"status": "healthy", "service": service, "version": __version__}

    # Fail fast: the server should not start with a broken schema
    logger.info("Validating GraphQL schema...", service=service)
    validate_schema(service)

    app.include_router(create_graphql_router(service, review_source), prefix="")
    logger.info("GraphQL endpoint initialized successfully", service=service, endpoint="/graphql")

    return app


cars_app = create_app("cars")
reviews_app = create_app("reviews")

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "carhub.api.app:cars_app",
        host=settings.api_host,
        port=get_service_port("cars"),
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
