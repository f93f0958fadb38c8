"""Command side of CQRS pattern."""

from .base import Command, CommandHandler, CommandBus, CommandResult, logging_middleware
from .catalog import (
    CreateUserCommand,
    CreateArtistCommand,
    CreateAlbumCommand,
    CreateSongCommand,
    CreatePlaylistOnLengthCommand,
    CreatePlaylistOnNameCommand,
    FindPlaylistCommand,
    LikeSongCommand,
)

__all__ = [
    "Command",
    "CommandHandler",
    "CommandBus",
    "CommandResult",
    "logging_middleware",
    "CreateUserCommand",
    "CreateArtistCommand",
    "CreateAlbumCommand",
    "CreateSongCommand",
    "CreatePlaylistOnLengthCommand",
    "CreatePlaylistOnNameCommand",
    "FindPlaylistCommand",
    "LikeSongCommand",
]
