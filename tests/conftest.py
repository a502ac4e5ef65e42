"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from carhub.graphql.resolvers.review import REVIEW_SOURCE_KEY
from carhub.graphql.types.review import Review
from carhub.reviews.source import InMemoryReviewSource, ReviewSource


@pytest.fixture
def sample_reviews() -> list[Review]:
    """Reviews for two products, deliberately not sorted by id."""
    return [
        Review(id=11, product_id=7, text="Great seats", stars=4),
        Review(id=3, product_id=8, text="Noisy", stars=2),
        Review(id=5, product_id=7, text="Would buy again", stars=5),
    ]


@pytest.fixture
def review_source(sample_reviews: list[Review]) -> InMemoryReviewSource:
    return InMemoryReviewSource(sample_reviews)


@pytest.fixture
def review_source_double() -> MagicMock:
    """A ReviewSource test double with distinct sentinel results per method."""
    source = MagicMock(spec=ReviewSource)
    source.get_reviews.return_value = [
        Review(id=100, product_id=-1, text="from get_reviews", stars=1)
    ]
    source.get_all_reviews.return_value = [
        Review(id=200, product_id=-2, text="from get_all_reviews", stars=2)
    ]
    return source


@pytest.fixture
def make_info() -> Callable[[Any], MagicMock]:
    """Build a mock GraphQL info object whose context carries a review source."""

    def _make_info(source: Any) -> MagicMock:
        info = MagicMock(spec=strawberry.Info)
        info.context = {"request": MagicMock(), REVIEW_SOURCE_KEY: source}
        return info

    return _make_info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
