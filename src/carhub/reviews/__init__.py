"""
Review data sources for the reviews subgraph
"""

from .source import DEFAULT_REVIEWS, InMemoryReviewSource, ReviewSource

__all__ = ["DEFAULT_REVIEWS", "InMemoryReviewSource", "ReviewSource"]
