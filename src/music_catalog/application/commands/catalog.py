"""Catalog commands and their handlers.

Each handler runs one catalog operation through :class:`CatalogService`,
publishes a domain event when it succeeds and describes the touched entity in
``CommandResult.result_data``.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .base import Command, CommandHandler, CommandResult
from ...domain.catalog.services import CatalogService
from ...events import (
    EventBus,
    DomainEvent,
    UserCreated,
    ArtistCreated,
    AlbumCreated,
    SongCreated,
    PlaylistCreated,
    PlaylistOpened,
    SongLiked,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateUserCommand(Command):
    name: str
    mobile: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateArtistCommand(Command):
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateAlbumCommand(Command):
    """Create an album; an unknown artist name creates the artist as well."""
    title: str
    artist_name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class CreateSongCommand(Command):
    title: str
    album_title: str
    length: int


@dataclass(frozen=True, slots=True, kw_only=True)
class CreatePlaylistOnLengthCommand(Command):
    mobile: str
    title: str
    length: int


@dataclass(frozen=True, slots=True, kw_only=True)
class CreatePlaylistOnNameCommand(Command):
    mobile: str
    title: str
    song_titles: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True, kw_only=True)
class FindPlaylistCommand(Command):
    mobile: str
    title: str


@dataclass(frozen=True, slots=True, kw_only=True)
class LikeSongCommand(Command):
    mobile: str
    song_title: str


class CatalogCommandHandler(CommandHandler):
    """Shared plumbing for handlers backed by the catalog service."""

    def __init__(self, service: CatalogService, event_bus: Optional[EventBus] = None):
        self.service = service
        self.event_bus = event_bus

    def _succeed(
        self,
        command: Command,
        message: str,
        event: DomainEvent,
        preceding: Sequence[DomainEvent] = (),
        **result_data,
    ) -> CommandResult:
        events = [*preceding, event]
        if self.event_bus:
            for published in events:
                self.event_bus.publish(published)
        return CommandResult(
            success=True,
            command_id=command.command_id,
            message=message,
            events=events if self.event_bus else [],
            result_data=result_data,
        )


class CreateUserCommandHandler(CatalogCommandHandler):
    command_type = CreateUserCommand

    def handle(self, command: CreateUserCommand) -> CommandResult:
        result = self.service.create_user(command.name, command.mobile)
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        user = result.value()
        return self._succeed(
            command,
            f"Created user {user.name}",
            UserCreated(aggregate_id=user.id, name=user.name, mobile=user.mobile),
            user=user.to_dict(),
        )


class CreateArtistCommandHandler(CatalogCommandHandler):
    command_type = CreateArtistCommand

    def handle(self, command: CreateArtistCommand) -> CommandResult:
        result = self.service.create_artist(command.name)
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        artist = result.value()
        return self._succeed(
            command,
            f"Created artist {artist.name}",
            ArtistCreated(aggregate_id=artist.id, name=artist.name),
            artist=artist.to_dict(),
        )


class CreateAlbumCommandHandler(CatalogCommandHandler):
    command_type = CreateAlbumCommand

    def handle(self, command: CreateAlbumCommand) -> CommandResult:
        store = self.service.store
        artist_existed = store.find_artist(command.artist_name) is not None

        result = self.service.create_album(command.title, command.artist_name)
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        album = result.value()
        artist = store.album_artist(album)
        preceding = [] if artist_existed else [ArtistCreated(aggregate_id=artist.id, name=artist.name)]

        return self._succeed(
            command,
            f"Created album {album.title} by {artist.name}",
            AlbumCreated(
                aggregate_id=album.id,
                title=album.title,
                artist_id=artist.id,
                artist_name=artist.name,
            ),
            preceding,
            album=album.to_dict(),
            artist=artist.to_dict(),
            artist_created=not artist_existed,
        )


class CreateSongCommandHandler(CatalogCommandHandler):
    command_type = CreateSongCommand

    def handle(self, command: CreateSongCommand) -> CommandResult:
        result = self.service.create_song(command.title, command.album_title, command.length)
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        song = result.value()
        album = self.service.store.song_album(song)
        return self._succeed(
            command,
            f"Created song {song.title} on {album.title}",
            SongCreated(
                aggregate_id=song.id,
                title=song.title,
                album_title=album.title,
                length=song.length,
            ),
            song=song.to_dict(),
            album=album.to_dict(),
        )


class _CreatePlaylistHandler(CatalogCommandHandler):
    strategy = ""

    def _created(self, command, result) -> CommandResult:
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        playlist = result.value()
        song_titles = [song.title for song in self.service.store.playlist_songs(playlist)]
        return self._succeed(
            command,
            f"Created playlist {playlist.title} with {len(song_titles)} songs",
            PlaylistCreated(
                aggregate_id=playlist.id,
                title=playlist.title,
                creator_mobile=command.mobile,
                song_titles=song_titles,
                strategy=self.strategy,
            ),
            playlist=playlist.to_dict(),
            songs=song_titles,
        )


class CreatePlaylistOnLengthCommandHandler(_CreatePlaylistHandler):
    command_type = CreatePlaylistOnLengthCommand
    strategy = "length"

    def handle(self, command: CreatePlaylistOnLengthCommand) -> CommandResult:
        return self._created(
            command,
            self.service.create_playlist_on_length(command.mobile, command.title, command.length),
        )


class CreatePlaylistOnNameCommandHandler(_CreatePlaylistHandler):
    command_type = CreatePlaylistOnNameCommand
    strategy = "name"

    def handle(self, command: CreatePlaylistOnNameCommand) -> CommandResult:
        return self._created(
            command,
            self.service.create_playlist_on_name(command.mobile, command.title, command.song_titles),
        )


class FindPlaylistCommandHandler(CatalogCommandHandler):
    command_type = FindPlaylistCommand

    def handle(self, command: FindPlaylistCommand) -> CommandResult:
        result = self.service.find_playlist(command.mobile, command.title)
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        playlist = result.value()
        listeners = [user.name for user in self.service.store.playlist_listeners(playlist)]
        return self._succeed(
            command,
            f"Opened playlist {playlist.title}",
            PlaylistOpened(
                aggregate_id=playlist.id,
                title=playlist.title,
                listener_mobile=command.mobile,
                listener_count=len(listeners),
            ),
            playlist=playlist.to_dict(),
            listeners=listeners,
        )


class LikeSongCommandHandler(CatalogCommandHandler):
    command_type = LikeSongCommand

    def handle(self, command: LikeSongCommand) -> CommandResult:
        known = self.service.store.find_song(command.song_title)
        likes_before = known.likes if known is not None else 0

        result = self.service.like_song(command.mobile, command.song_title)
        if result.is_failure():
            return CommandResult.from_error(command, result.error())

        song = result.value()
        if song.likes == likes_before:
            # Repeat like: nothing changed, so nothing is published
            return CommandResult(
                success=True,
                command_id=command.command_id,
                message=f"{command.mobile} already likes {song.title}",
                result_data={"song": song.to_dict()},
            )

        return self._succeed(
            command,
            f"{song.title} now has {song.likes} likes",
            SongLiked(
                aggregate_id=song.id,
                title=song.title,
                liker_mobile=command.mobile,
                likes=song.likes,
            ),
            song=song.to_dict(),
        )


CATALOG_COMMAND_HANDLERS = (
    CreateUserCommandHandler,
    CreateArtistCommandHandler,
    CreateAlbumCommandHandler,
    CreateSongCommandHandler,
    CreatePlaylistOnLengthCommandHandler,
    CreatePlaylistOnNameCommandHandler,
    FindPlaylistCommandHandler,
    LikeSongCommandHandler,
)
