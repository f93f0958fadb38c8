"""Query side of CQRS pattern."""

from .base import Query, QueryHandler, QueryBus, QueryResult
from .catalog import (
    MostPopularArtistQuery,
    MostPopularSongQuery,
    CatalogStatisticsQuery,
    PlaylistDetailsQuery,
)

__all__ = [
    "Query",
    "QueryHandler",
    "QueryBus",
    "QueryResult",
    "MostPopularArtistQuery",
    "MostPopularSongQuery",
    "CatalogStatisticsQuery",
    "PlaylistDetailsQuery",
]
