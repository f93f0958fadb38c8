"""Tests for catalog entities."""

import pytest

from music_catalog.domain.catalog.entities import User, Artist, Album, Song, Playlist


class TestIdentity:

    def test_ids_generated_and_unique(self):
        first = User(name="Alice", mobile="999")
        second = User(name="Alice", mobile="999")

        assert first.id
        assert first.id != second.id

    def test_equality_is_identity(self):
        first = Artist(name="Queen")
        second = Artist(name="Queen")

        assert first != second
        assert first == first
        assert len({first, second}) == 2


class TestSong:

    def test_defaults(self):
        song = Song(title="S1", length=200)

        assert song.likes == 0

    @pytest.mark.parametrize("length,expected", [(200, "3:20"), (59, "0:59"), (60, "1:00")])
    def test_display_length(self, length, expected):
        assert Song(title="S1", length=length).display_length == expected

    def test_to_dict(self):
        song = Song(title="S1", length=200, likes=3)

        assert song.to_dict() == {"id": song.id, "title": "S1", "length": 200, "likes": 3}


class TestToDict:

    def test_user(self):
        user = User(name="Alice", mobile="999")
        assert user.to_dict() == {"id": user.id, "name": "Alice", "mobile": "999"}

    def test_artist(self):
        artist = Artist(name="Queen")
        assert artist.to_dict() == {"id": artist.id, "name": "Queen", "likes": 0}

    def test_album_and_playlist(self):
        album = Album(title="Hits")
        playlist = Playlist(title="Faves")

        assert album.to_dict() == {"id": album.id, "title": "Hits"}
        assert playlist.to_dict() == {"id": playlist.id, "title": "Faves"}
