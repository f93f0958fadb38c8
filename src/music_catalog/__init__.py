"""Music Catalog

An in-memory catalog of users, artists, albums, songs and playlists for a
music-streaming service, with likes and playlist listenership.
"""

__version__ = "0.1.0"

from .domain.catalog import (
    User,
    Artist,
    Album,
    Song,
    Playlist,
    CatalogStore,
    CatalogService,
    NO_ARTIST_FOUND,
    NO_SONG_FOUND,
)
from .domain.result import DomainError, InvalidArgumentError, DuplicateError, NotFoundError
from .infrastructure.repositories import InMemoryCatalogStore
from .application.catalog_app import CatalogApplication
from .exceptions import MusicCatalogError, ConfigurationError, ScriptError

__all__ = [
    # Entities
    "User",
    "Artist",
    "Album",
    "Song",
    "Playlist",

    # Store and service
    "CatalogStore",
    "InMemoryCatalogStore",
    "CatalogService",
    "CatalogApplication",
    "NO_ARTIST_FOUND",
    "NO_SONG_FOUND",

    # Errors
    "MusicCatalogError",
    "ConfigurationError",
    "ScriptError",
    "DomainError",
    "InvalidArgumentError",
    "DuplicateError",
    "NotFoundError",
]
