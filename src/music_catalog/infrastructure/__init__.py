"""
Infrastructure Layer - Music Catalog

Concrete implementations of the domain interfaces.
"""

from .repositories import InMemoryCatalogStore

__all__ = ["InMemoryCatalogStore"]
