"""
Carhub GraphQL services
Car lookup service and reviews federation subgraph backed by mock data
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
