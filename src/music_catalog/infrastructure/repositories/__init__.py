"""
Store Implementations - Infrastructure Layer

This package contains the catalog store implementations.
"""

from .catalog_repository import InMemoryCatalogStore

__all__ = [
    "InMemoryCatalogStore",
]
