"""
Review and Product GraphQL type definitions for the reviews subgraph
"""

import strawberry


@strawberry.type
class Review:
    """Review type for the reviews subgraph."""

    id: int
    product_id: int
    text: str
    stars: int


@strawberry.federation.type(keys=["id"])
class Product:
    """Product entity, resolved by other subgraphs through its ``id`` key."""

    id: strawberry.ID | None

    @classmethod
    def resolve_reference(cls, id: strawberry.ID | None = None) -> "Product":
        from ..resolvers.review import resolve_product, to_product_id

        return resolve_product(to_product_id(id))

    @strawberry.field
    def reviews(self, info: strawberry.Info) -> list[Review]:
        """Get the reviews written for this product."""
        from ..resolvers.review import resolve_product_reviews

        return resolve_product_reviews(self, info)
