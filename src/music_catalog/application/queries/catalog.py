"""Catalog queries and their handlers."""

from dataclasses import dataclass
from typing import Any, Dict

from .base import Query, QueryHandler
from ...domain.catalog.services import CatalogService


@dataclass(frozen=True, slots=True, kw_only=True)
class MostPopularArtistQuery(Query):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class MostPopularSongQuery(Query):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogStatisticsQuery(Query):
    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class PlaylistDetailsQuery(Query):
    """Look up a playlist by title (case-insensitive) without opening it."""
    title: str


class CatalogQueryHandler(QueryHandler):

    def __init__(self, service: CatalogService):
        self.service = service


class MostPopularArtistQueryHandler(CatalogQueryHandler):
    query_type = MostPopularArtistQuery

    def handle(self, query: MostPopularArtistQuery) -> str:
        return self.service.most_popular_artist()


class MostPopularSongQueryHandler(CatalogQueryHandler):
    query_type = MostPopularSongQuery

    def handle(self, query: MostPopularSongQuery) -> str:
        return self.service.most_popular_song()


class CatalogStatisticsQueryHandler(CatalogQueryHandler):
    query_type = CatalogStatisticsQuery

    def handle(self, query: CatalogStatisticsQuery) -> Dict[str, Any]:
        return self.service.statistics()


class PlaylistDetailsQueryHandler(CatalogQueryHandler):
    query_type = PlaylistDetailsQuery

    def handle(self, query: PlaylistDetailsQuery) -> Dict[str, Any]:
        # Raises NotFoundError; the bus reports it as a failed result
        return self.service.describe_playlist(query.title).or_else_raise()


CATALOG_QUERY_HANDLERS = (
    MostPopularArtistQueryHandler,
    MostPopularSongQueryHandler,
    CatalogStatisticsQueryHandler,
    PlaylistDetailsQueryHandler,
)
