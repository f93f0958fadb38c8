"""Catalog Context Services.

``CatalogService`` is the entry point the application layer uses. It runs
each store operation and reports the outcome as a ``Result`` so rule
violations never escape as exceptions; anything that is not a
``DomainError`` still propagates.
"""

import logging
from typing import Any, Callable, Dict, Iterable, TypeVar

from .entities import User, Artist, Album, Song, Playlist
from .repositories import CatalogStore
from ..result import Result, DomainError, NotFoundError, try_catch

logger = logging.getLogger(__name__)

T = TypeVar('T')


class CatalogService:
    """Result-returning facade over a :class:`CatalogStore`."""

    def __init__(self, store: CatalogStore):
        self.store = store

    def _run(self, operation: str, fn: Callable[[], T]) -> Result[T, DomainError]:
        result = try_catch(fn, DomainError)
        if result.is_success():
            logger.debug("%s succeeded: %r", operation, result.value())
        else:
            logger.info("%s rejected: %s", operation, result.error())
        return result

    def create_user(self, name: str, mobile: str) -> Result[User, DomainError]:
        return self._run("create_user", lambda: self.store.create_user(name, mobile))

    def create_artist(self, name: str) -> Result[Artist, DomainError]:
        return self._run("create_artist", lambda: self.store.create_artist(name))

    def create_album(self, title: str, artist_name: str) -> Result[Album, DomainError]:
        """Create an album, creating the artist too when the name is unknown."""
        return self._run("create_album", lambda: self.store.create_album(title, artist_name))

    def create_song(self, title: str, album_title: str, length: int) -> Result[Song, DomainError]:
        return self._run("create_song", lambda: self.store.create_song(title, album_title, length))

    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Result[Playlist, DomainError]:
        return self._run(
            "create_playlist_on_length",
            lambda: self.store.create_playlist_on_length(mobile, title, length),
        )

    def create_playlist_on_name(
        self, mobile: str, title: str, song_titles: Iterable[str]
    ) -> Result[Playlist, DomainError]:
        return self._run(
            "create_playlist_on_name",
            lambda: self.store.create_playlist_on_name(mobile, title, song_titles),
        )

    def find_playlist(self, mobile: str, playlist_title: str) -> Result[Playlist, DomainError]:
        return self._run("find_playlist", lambda: self.store.find_playlist(mobile, playlist_title))

    def like_song(self, mobile: str, song_title: str) -> Result[Song, DomainError]:
        return self._run("like_song", lambda: self.store.like_song(mobile, song_title))

    def most_popular_artist(self) -> str:
        return self.store.most_popular_artist()

    def most_popular_song(self) -> str:
        return self.store.most_popular_song()

    def statistics(self) -> Dict[str, Any]:
        return self.store.statistics()

    def describe_playlist(self, title: str) -> Result[Dict[str, Any], DomainError]:
        """Playlist with its creator, songs and listeners as plain data."""
        def describe() -> Dict[str, Any]:
            playlist = self.store.find_playlist_by_title(title)
            if playlist is None:
                raise NotFoundError(f"Playlist does not exist: {title}")
            return {
                **playlist.to_dict(),
                "creator": self.store.playlist_creator(playlist).name,
                "songs": [song.title for song in self.store.playlist_songs(playlist)],
                "listeners": [user.name for user in self.store.playlist_listeners(playlist)],
            }

        return self._run("describe_playlist", describe)
