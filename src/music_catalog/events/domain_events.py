"""
Domain Events - Specific event implementations.

This module defines the events published after catalog changes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .event_bus import DomainEvent


@dataclass(kw_only=True)
class UserCreated(DomainEvent):
    """Event fired when a user is registered."""
    name: str
    mobile: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"name": self.name, "mobile": self.mobile}


@dataclass(kw_only=True)
class ArtistCreated(DomainEvent):
    """Event fired when an artist is created explicitly."""
    name: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(kw_only=True)
class AlbumCreated(DomainEvent):
    """Event fired when an album is created."""
    title: str
    artist_id: str
    artist_name: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "artist_id": self.artist_id,
            "artist_name": self.artist_name,
        }


@dataclass(kw_only=True)
class SongCreated(DomainEvent):
    """Event fired when a song is added to an album."""
    title: str
    album_title: str
    length: int

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "album_title": self.album_title,
            "length": self.length,
        }


@dataclass(kw_only=True)
class PlaylistCreated(DomainEvent):
    """Event fired when a playlist is created."""
    title: str
    creator_mobile: str
    song_titles: List[str] = field(default_factory=list)
    strategy: str = "length"  # length, name

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "creator_mobile": self.creator_mobile,
            "song_titles": self.song_titles,
            "strategy": self.strategy,
        }


@dataclass(kw_only=True)
class PlaylistOpened(DomainEvent):
    """Event fired when a user opens a playlist."""
    title: str
    listener_mobile: str
    listener_count: int

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "listener_mobile": self.listener_mobile,
            "listener_count": self.listener_count,
        }


@dataclass(kw_only=True)
class SongLiked(DomainEvent):
    """Event fired when a user likes a song (repeat likes included)."""
    title: str
    liker_mobile: str
    likes: int

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "liker_mobile": self.liker_mobile,
            "likes": self.likes,
        }
