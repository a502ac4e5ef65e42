"""
Review source capability and the in-memory mock implementation
"""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from ..graphql.types.review import Product, Review
from ..logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class ReviewSource(Protocol):
    """Provides reviews to the reviews subgraph.

    Implementations own the order and contents of the returned reviews;
    resolvers pass them through unmodified.
    """

    def get_reviews(self, product: Product) -> list[Review]: ...

    def get_all_reviews(self) -> list[Review]: ...


DEFAULT_REVIEWS: tuple[tuple[int, int, str, int], ...] = (
    (1, 1, "Instant torque and a very quiet cabin.", 5),
    (2, 1, "Range drops noticeably in winter.", 3),
    (3, 2, "Looks like a concept car, drives like one too.", 5),
    (4, 3, "Loud in the best possible way.", 4),
)


class InMemoryReviewSource:
    """ReviewSource backed by a fixed sequence of reviews."""

    def __init__(self, reviews: Iterable[Review] | None = None) -> None:
        if reviews is None:
            reviews = (
                Review(id=id_, product_id=product_id, text=text, stars=stars)
                for id_, product_id, text, stars in DEFAULT_REVIEWS
            )
        self._reviews: tuple[Review, ...] = tuple(reviews)

    def get_reviews(self, product: Product) -> list[Review]:
        matches = [review for review in self._reviews if review.product_id == product.id]
        logger.debug("Loaded reviews for product", product_id=product.id, count=len(matches))
        return matches

    def get_all_reviews(self) -> list[Review]:
        return list(self._reviews)
