"""Tests for the catalog query side."""

from dataclasses import dataclass

import pytest

from music_catalog.application.catalog_app import CatalogApplication
from music_catalog.application.commands import (
    CreateUserCommand,
    CreateAlbumCommand,
    CreateSongCommand,
    CreatePlaylistOnLengthCommand,
    LikeSongCommand,
)
from music_catalog.application.queries import (
    Query,
    QueryBus,
    QueryHandler,
    MostPopularArtistQuery,
    MostPopularSongQuery,
    CatalogStatisticsQuery,
    PlaylistDetailsQuery,
)
from music_catalog.models.config import CatalogConfig


@pytest.fixture
def app():
    app = CatalogApplication()
    app.execute(CreateUserCommand(name="Alice", mobile="999"))
    app.execute(CreateAlbumCommand(title="Hits", artist_name="A1"))
    app.execute(CreateSongCommand(title="S1", album_title="Hits", length=200))
    return app


class TestQuery:

    def test_to_dict(self):
        query = PlaylistDetailsQuery(title="Faves")

        data = query.to_dict()

        assert data["query_type"] == "PlaylistDetailsQuery"
        assert data["title"] == "Faves"
        assert "query_id" in data


class TestQueryBus:

    def test_unregistered_query(self):
        result = QueryBus().dispatch(Query())

        assert not result.success
        assert "No handler registered" in result.errors[0]

    def test_unexpected_error_reported(self):
        @dataclass(frozen=True, slots=True, kw_only=True)
        class BrokenQuery(Query):
            pass

        class BrokenHandler(QueryHandler):
            query_type = BrokenQuery

            def handle(self, query):
                raise RuntimeError("boom")

        bus = QueryBus()
        bus.register(BrokenQuery, BrokenHandler())

        result = bus.dispatch(BrokenQuery())

        assert not result.success
        assert result.error_kind == "internal_error"


class TestCatalogQueries:

    def test_empty_catalog_sentinels(self):
        app = CatalogApplication()

        assert app.ask(MostPopularArtistQuery()).data == "No artist found"
        assert app.ask(MostPopularSongQuery()).data == "No song found"

    def test_configured_sentinels(self):
        config = CatalogConfig()
        config.sentinels.no_artist = "nobody"
        app = CatalogApplication(config)

        assert app.ask(MostPopularArtistQuery()).data == "nobody"

    def test_most_popular(self, app):
        app.execute(CreateSongCommand(title="S2", album_title="Hits", length=100))
        app.execute(LikeSongCommand(mobile="999", song_title="S2"))

        assert app.ask(MostPopularSongQuery()).data == "S2"
        assert app.ask(MostPopularArtistQuery()).data == "A1"

    def test_statistics(self, app):
        result = app.ask(CatalogStatisticsQuery())

        assert result.success
        assert result.data["songs"] == 1
        assert result.execution_time_ms is not None

    def test_playlist_details(self, app):
        app.execute(CreatePlaylistOnLengthCommand(mobile="999", title="Faves", length=200))

        result = app.ask(PlaylistDetailsQuery(title="faves"))

        assert result.success
        assert result.data["songs"] == ["S1"]
        assert result.data["listeners"] == ["Alice"]
        assert result.data["creator"] == "Alice"

    def test_playlist_details_does_not_add_listener(self, app):
        app.execute(CreatePlaylistOnLengthCommand(mobile="999", title="Faves", length=200))
        app.ask(PlaylistDetailsQuery(title="Faves"))

        playlist = app.store.find_playlist_by_title("Faves")
        assert len(app.store.playlist_listeners(playlist)) == 1

    def test_playlist_details_missing(self, app):
        result = app.ask(PlaylistDetailsQuery(title="Nope"))

        assert not result.success
        assert result.error_kind == "not_found"
