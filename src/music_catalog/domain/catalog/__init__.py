"""
Catalog Context - the music-streaming catalog.

This bounded context is responsible for:
- Holding users, artists, albums, songs and playlists
- Maintaining the relationships between them
- Tracking likes and playlist listeners
"""

from .entities import User, Artist, Album, Song, Playlist
from .repositories import CatalogStore, NO_ARTIST_FOUND, NO_SONG_FOUND
from .services import CatalogService

__all__ = [
    # Entities
    "User",
    "Artist",
    "Album",
    "Song",
    "Playlist",
    # Store
    "CatalogStore",
    "NO_ARTIST_FOUND",
    "NO_SONG_FOUND",
    # Services
    "CatalogService",
]
