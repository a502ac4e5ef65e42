"""
Root GraphQL query definitions for the reviews subgraph
"""

import strawberry

from ..types.review import Review


@strawberry.type(name="Query")
class ReviewsQuery:
    """Root GraphQL query type of the reviews subgraph."""

    @strawberry.field
    def reviews(
        self, info: strawberry.Info, product_id: strawberry.ID | None = None
    ) -> list[Review]:
        """Get the reviews of a product."""
        from ..resolvers.review import resolve_reviews_by_product_id

        return resolve_reviews_by_product_id(info, product_id)

    @strawberry.field
    def all_reviews(self, info: strawberry.Info) -> list[Review]:
        """Get every review."""
        from ..resolvers.review import resolve_all_reviews

        return resolve_all_reviews(info)
