"""
Domain Layer - Music Catalog

Bounded Contexts:
- Catalog: users, artists, albums, songs, playlists and their relationships
"""

from .catalog import (
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

# Result pattern for error handling
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
    as_result,
    collect,
    partition,
    try_catch,
    DomainError,
    InvalidArgumentError,
    DuplicateError,
    NotFoundError,
)

__all__ = [
    # Catalog context
    "User",
    "Artist",
    "Album",
    "Song",
    "Playlist",
    "CatalogStore",
    "CatalogService",
    "NO_ARTIST_FOUND",
    "NO_SONG_FOUND",
    # Result pattern
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "as_result",
    "collect",
    "partition",
    "try_catch",
    "DomainError",
    "InvalidArgumentError",
    "DuplicateError",
    "NotFoundError",
]
