"""
Root GraphQL query definitions for the car service
"""

import strawberry

from ..types.car import Car


@strawberry.type(name="Query")
class CarQuery:
    """Root GraphQL query type of the car service."""

    @strawberry.field
    def ping(self) -> str:
        """Check that the car service is running."""
        from ..resolvers.car import resolve_ping

        return resolve_ping()

    @strawberry.field
    def car(self, vin: str | None = None) -> Car:
        """Get a car by VIN."""
        from ..resolvers.car import resolve_car

        return resolve_car(vin)

    @strawberry.field
    def cars(self, limit: int | None = None) -> list[Car]:
        """Get up to ``limit`` cars."""
        from ..resolvers.car import resolve_cars

        return resolve_cars(limit)
