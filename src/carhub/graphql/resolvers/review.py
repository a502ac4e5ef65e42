"""
Review resolvers for the reviews subgraph
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import strawberry

from ...logging import get_logger

if TYPE_CHECKING:
    from ...reviews.source import ReviewSource
    from ..types.review import Product, Review

logger = get_logger(__name__)

REVIEW_SOURCE_KEY = "review_source"


def to_product_id(value: Any) -> int | None:
    """Convert a GraphQL ``ID`` value into a numeric product identifier."""
    if value is None:
        return None
    return int(value)


def get_review_source(info: strawberry.Info) -> ReviewSource:
    """Get the review source injected into the GraphQL context."""
    return info.context[REVIEW_SOURCE_KEY]


def resolve_product(id: int | None) -> Product:
    """Entity mapping for ``Product``; the identifier is not validated."""
    from ..types.review import Product

    return Product(id=id)


def resolve_product_reviews(product: Product, info: strawberry.Info) -> list[Review]:
    logger.debug("Resolving product reviews", product_id=product.id)
    return get_review_source(info).get_reviews(product)


def resolve_reviews_by_product_id(info: strawberry.Info, product_id: Any) -> list[Review]:
    product = resolve_product(to_product_id(product_id))
    return resolve_product_reviews(product, info)


def resolve_all_reviews(info: strawberry.Info) -> list[Review]:
    logger.debug("Resolving all reviews")
    return get_review_source(info).get_all_reviews()
