"""Catalog Context Entities.

This module defines the entities held by the catalog store: users, artists,
albums, songs and playlists. Relationships between them live in the store,
not on the entities, so an entity only carries its own attributes.

Entities compare by identity (``eq=False``) and carry a generated ``id`` so
two users with the same mobile number or two artists with the same name stay
distinct.
"""

from dataclasses import dataclass, field
from typing import Any, Dict
from uuid import uuid4


def _new_id() -> str:
    return str(uuid4())


@dataclass(eq=False)
class User:
    """A listener of the streaming service, looked up by mobile number."""

    name: str
    mobile: str
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "mobile": self.mobile}


@dataclass(eq=False)
class Artist:
    """A musical artist or group.

    ``likes`` counts the likes given to the artist's songs; the store keeps it
    current when likes propagate to artists.
    """

    name: str
    likes: int = 0
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "likes": self.likes}


@dataclass(eq=False)
class Album:
    """A release owned by exactly one artist."""

    title: str
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title}


@dataclass(eq=False)
class Song:
    """A track on exactly one album."""

    title: str
    length: int  # seconds
    likes: int = 0
    id: str = field(default_factory=_new_id)

    @property
    def display_length(self) -> str:
        """Length formatted as m:ss."""
        minutes, seconds = divmod(self.length, 60)
        return f"{minutes}:{seconds:02d}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "length": self.length,
            "likes": self.likes,
        }


@dataclass(eq=False)
class Playlist:
    """A fixed selection of songs with a creator and growing listeners."""

    title: str
    id: str = field(default_factory=_new_id)

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "title": self.title}
