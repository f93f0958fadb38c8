"""Catalog Context Store Interface.

This module defines the interface of the catalog store. Implementations hold
every entity and relationship of the catalog and enforce its integrity rules.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional, Tuple

from .entities import User, Artist, Album, Song, Playlist

NO_ARTIST_FOUND = "No artist found"
NO_SONG_FOUND = "No song found"


class CatalogStore(ABC):
    """Append-only store for the catalog entities and their relationships."""

    # Creation

    @abstractmethod
    def create_user(self, name: str, mobile: str) -> User:
        """Create a user. Mobile numbers are not required to be unique."""
        pass

    @abstractmethod
    def create_artist(self, name: str) -> Artist:
        """Create an artist. Duplicate names are allowed."""
        pass

    @abstractmethod
    def create_album(self, title: str, artist_name: str) -> Album:
        """Create an album for the named artist.

        Side effect: creates the artist when no artist matches the name.
        """
        pass

    @abstractmethod
    def create_song(self, title: str, album_title: str, length: int) -> Song:
        """Create a song on an existing album."""
        pass

    @abstractmethod
    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Playlist:
        """Create a playlist of every song with exactly the given length."""
        pass

    @abstractmethod
    def create_playlist_on_name(self, mobile: str, title: str, song_titles: Iterable[str]) -> Playlist:
        """Create a playlist of every song whose title is listed (case-sensitive)."""
        pass

    # Listening and likes

    @abstractmethod
    def find_playlist(self, mobile: str, playlist_title: str) -> Playlist:
        """Open a playlist, registering the user as a listener."""
        pass

    @abstractmethod
    def like_song(self, mobile: str, song_title: str) -> Song:
        """Register a like from the user; repeat likes are no-ops."""
        pass

    # Aggregates

    @abstractmethod
    def most_popular_artist(self) -> str:
        """Name of the most liked artist, or a sentinel when there are none."""
        pass

    @abstractmethod
    def most_popular_song(self) -> str:
        """Title of the most liked song, or a sentinel when there are none."""
        pass

    @abstractmethod
    def statistics(self) -> Dict[str, Any]:
        """Entity counts and popularity summary."""
        pass

    # Collections

    @abstractmethod
    def users(self) -> Tuple[User, ...]:
        pass

    @abstractmethod
    def artists(self) -> Tuple[Artist, ...]:
        pass

    @abstractmethod
    def albums(self) -> Tuple[Album, ...]:
        pass

    @abstractmethod
    def songs(self) -> Tuple[Song, ...]:
        pass

    @abstractmethod
    def playlists(self) -> Tuple[Playlist, ...]:
        pass

    # Lookups by business key; None when missing

    @abstractmethod
    def find_user(self, mobile: str) -> Optional[User]:
        pass

    @abstractmethod
    def find_artist(self, name: str) -> Optional[Artist]:
        pass

    @abstractmethod
    def find_album(self, title: str) -> Optional[Album]:
        pass

    @abstractmethod
    def find_song(self, title: str) -> Optional[Song]:
        pass

    @abstractmethod
    def find_playlist_by_title(self, title: str) -> Optional[Playlist]:
        pass

    # Relationships; NotFoundError for entities the store does not hold

    @abstractmethod
    def artist_albums(self, artist: Artist) -> Tuple[Album, ...]:
        pass

    @abstractmethod
    def album_artist(self, album: Album) -> Artist:
        pass

    @abstractmethod
    def album_songs(self, album: Album) -> Tuple[Song, ...]:
        pass

    @abstractmethod
    def song_album(self, song: Song) -> Album:
        pass

    @abstractmethod
    def playlist_songs(self, playlist: Playlist) -> Tuple[Song, ...]:
        pass

    @abstractmethod
    def playlist_listeners(self, playlist: Playlist) -> Tuple[User, ...]:
        pass

    @abstractmethod
    def playlist_creator(self, playlist: Playlist) -> User:
        pass

    @abstractmethod
    def playlists_created_by(self, user: User) -> Tuple[Playlist, ...]:
        pass

    @abstractmethod
    def user_playlists(self, user: User) -> Tuple[Playlist, ...]:
        pass

    @abstractmethod
    def song_likers(self, song: Song) -> Tuple[User, ...]:
        pass
