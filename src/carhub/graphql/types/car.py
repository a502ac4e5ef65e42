"""
Car GraphQL type definitions
"""

import strawberry


@strawberry.type
class Car:
    """Car type for the car service API."""

    vin: str | None
    model: str
    color: str
    year: int
    is_electric: bool
