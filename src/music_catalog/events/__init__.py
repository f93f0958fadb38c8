"""
Event System - Domain Events Architecture

This package implements the events published when the catalog changes.
"""

from .event_bus import EventBus, DomainEvent
from .domain_events import (
    UserCreated,
    ArtistCreated,
    AlbumCreated,
    SongCreated,
    PlaylistCreated,
    PlaylistOpened,
    SongLiked,
)

__all__ = [
    # Core event system
    "EventBus",
    "DomainEvent",
    # Domain events
    "UserCreated",
    "ArtistCreated",
    "AlbumCreated",
    "SongCreated",
    "PlaylistCreated",
    "PlaylistOpened",
    "SongLiked",
]
