"""
Car resolvers for the car service
"""

from ...config import settings
from ...logging import get_logger
from ..types.car import Car

logger = get_logger(__name__)

PING_MESSAGE = "pong - car service is running!"


def mock_cars() -> list[Car]:
    """Build the fixed mock car list, in display order."""
    return [
        Car(vin="VIN001", model="Tesla Model S", color="Red", year=2024, is_electric=True),
        Car(vin="VIN002", model="BMW i8", color="Blue", year=2023, is_electric=True),
        Car(vin="VIN003", model="Ford Mustang", color="Black", year=2022, is_electric=False),
    ]


def resolve_ping() -> str:
    return PING_MESSAGE


def resolve_car(vin: str | None) -> Car:
    """Return the mock car with the requested VIN echoed back.

    Every VIN, including null, resolves to the same car.
    """
    logger.debug("Resolving car", vin=vin)
    return Car(vin=vin, model="Tesla Model S", color="Red", year=2024, is_electric=True)


def resolve_cars(limit: int | None) -> list[Car]:
    """Return at most ``limit`` mock cars in order.

    A missing limit falls back to ``settings.cars_default_limit``; zero or
    negative limits yield no cars.
    """
    actual_limit = settings.cars_default_limit if limit is None else limit
    cars = mock_cars()[: max(actual_limit, 0)]
    logger.debug("Resolving cars", limit=limit, returned=len(cars))
    return cars
