"""
In-memory catalog store.

Entities are kept in insertion-ordered dictionaries keyed by their generated
ID. Business keys (mobile numbers, names, titles) are resolved through
secondary indexes that map the normalized key to the IDs sharing it, in
creation order, so "first match wins" lookups are dictionary hits.

Key normalization differs per field:
- mobile numbers match exactly
- artist names, album, song and playlist titles match case-insensitively
- the song titles given to ``create_playlist_on_name`` match exactly

Every operation validates its input and resolves its references before it
mutates anything, so a failing call leaves the store unchanged.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, TypeVar

from ...domain.catalog.entities import User, Artist, Album, Song, Playlist
from ...domain.catalog.repositories import CatalogStore, NO_ARTIST_FOUND, NO_SONG_FOUND
from ...domain.result import InvalidArgumentError, DuplicateError, NotFoundError

T = TypeVar('T')


def _fold(value: str) -> str:
    return value.lower()


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value == ""


class InMemoryCatalogStore(CatalogStore):
    """Catalog store holding everything in process memory."""

    def __init__(
        self,
        propagate_likes_to_artist: bool = True,
        no_artist_sentinel: str = NO_ARTIST_FOUND,
        no_song_sentinel: str = NO_SONG_FOUND,
    ):
        self.propagate_likes_to_artist = propagate_likes_to_artist
        self.no_artist_sentinel = no_artist_sentinel
        self.no_song_sentinel = no_song_sentinel

        self._users: Dict[str, User] = {}
        self._artists: Dict[str, Artist] = {}
        self._albums: Dict[str, Album] = {}
        self._songs: Dict[str, Song] = {}
        self._playlists: Dict[str, Playlist] = {}

        # Business key -> entity IDs in creation order
        self._user_mobile_index: Dict[str, List[str]] = {}
        self._artist_name_index: Dict[str, List[str]] = {}
        self._album_title_index: Dict[str, str] = {}  # unique
        self._song_title_index: Dict[str, List[str]] = {}
        self._playlist_title_index: Dict[str, List[str]] = {}

        # Relationships, all keyed and valued by entity ID
        self._artist_albums: Dict[str, List[str]] = {}
        self._album_artist: Dict[str, str] = {}
        self._album_songs: Dict[str, List[str]] = {}
        self._song_album: Dict[str, str] = {}
        self._playlist_songs: Dict[str, List[str]] = {}
        self._playlist_listeners: Dict[str, List[str]] = {}
        self._playlist_creator: Dict[str, str] = {}
        self._creator_playlists: Dict[str, List[str]] = {}
        self._user_playlists: Dict[str, List[str]] = {}
        self._song_likers: Dict[str, List[str]] = {}

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create_user(self, name: str, mobile: str) -> User:
        if _is_blank(name) or _is_blank(mobile):
            raise InvalidArgumentError("Name and Mobile cannot be empty")

        user = User(name=name, mobile=mobile)
        self._users[user.id] = user
        self._user_mobile_index.setdefault(mobile, []).append(user.id)
        self._user_playlists[user.id] = []
        self._creator_playlists[user.id] = []
        return user

    def create_artist(self, name: str) -> Artist:
        if _is_blank(name):
            raise InvalidArgumentError("Name cannot be empty")
        return self._add_artist(name)

    def create_album(self, title: str, artist_name: str) -> Album:
        if _is_blank(title):
            raise InvalidArgumentError("Title cannot be empty")
        if _is_blank(artist_name):
            raise InvalidArgumentError("Artist name cannot be empty")
        if _fold(title) in self._album_title_index:
            raise DuplicateError(f"Album already exists: {title}")

        artist = self.find_artist(artist_name)
        if artist is None:
            artist = self._add_artist(artist_name)

        album = Album(title=title)
        self._albums[album.id] = album
        self._album_title_index[_fold(title)] = album.id
        self._artist_albums[artist.id].append(album.id)
        self._album_artist[album.id] = artist.id
        self._album_songs[album.id] = []
        return album

    def create_song(self, title: str, album_title: str, length: int) -> Song:
        if _is_blank(title) or _is_blank(album_title) or not self._is_positive_int(length):
            raise InvalidArgumentError("Invalid song details")

        album = self.find_album(album_title)
        if album is None:
            raise NotFoundError(f"Album does not exist: {album_title}")

        song = Song(title=title, length=length)
        self._songs[song.id] = song
        self._song_title_index.setdefault(_fold(title), []).append(song.id)
        self._album_songs[album.id].append(song.id)
        self._song_album[song.id] = album.id
        self._song_likers[song.id] = []
        return song

    def create_playlist_on_length(self, mobile: str, title: str, length: int) -> Playlist:
        if _is_blank(title):
            raise InvalidArgumentError("Playlist title cannot be empty")
        user = self._require_user(mobile)

        matched = [song for song in self._songs.values() if song.length == length]
        return self._add_playlist(user, title, matched)

    def create_playlist_on_name(self, mobile: str, title: str, song_titles: Iterable[str]) -> Playlist:
        if _is_blank(title):
            raise InvalidArgumentError("Playlist title cannot be empty")
        if song_titles is None or isinstance(song_titles, str):
            raise InvalidArgumentError("Song titles must be a list of titles")
        user = self._require_user(mobile)

        # Exact match on purpose: titles elsewhere are case-insensitive.
        wanted = set(song_titles)
        matched = [song for song in self._songs.values() if song.title in wanted]
        return self._add_playlist(user, title, matched)

    # ------------------------------------------------------------------
    # Listening and likes
    # ------------------------------------------------------------------

    def find_playlist(self, mobile: str, playlist_title: str) -> Playlist:
        user = self._require_user(mobile)
        playlist = self.find_playlist_by_title(playlist_title)
        if playlist is None:
            raise NotFoundError(f"Playlist does not exist: {playlist_title}")

        listeners = self._playlist_listeners[playlist.id]
        if user.id not in listeners:
            listeners.append(user.id)
        self._link_user_playlist(user, playlist)
        return playlist

    def like_song(self, mobile: str, song_title: str) -> Song:
        user = self._require_user(mobile)
        song = self.find_song(song_title)
        if song is None:
            raise NotFoundError(f"Song does not exist: {song_title}")

        likers = self._song_likers[song.id]
        if user.id not in likers:
            likers.append(user.id)
            song.likes += 1
            if self.propagate_likes_to_artist:
                artist_id = self._album_artist[self._song_album[song.id]]
                self._artists[artist_id].likes += 1
        return song

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def most_popular_artist(self) -> str:
        if not self._artists:
            return self.no_artist_sentinel
        # max() keeps the first of equal maxima, i.e. the earliest created
        return max(self._artists.values(), key=lambda a: a.likes).name

    def most_popular_song(self) -> str:
        if not self._songs:
            return self.no_song_sentinel
        return max(self._songs.values(), key=lambda s: s.likes).title

    def statistics(self) -> Dict[str, Any]:
        return {
            "users": len(self._users),
            "artists": len(self._artists),
            "albums": len(self._albums),
            "songs": len(self._songs),
            "playlists": len(self._playlists),
            "total_song_likes": sum(s.likes for s in self._songs.values()),
            "total_listens": sum(len(ids) for ids in self._playlist_listeners.values()),
            "most_popular_artist": self.most_popular_artist(),
            "most_popular_song": self.most_popular_song(),
        }

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def users(self) -> Tuple[User, ...]:
        return tuple(self._users.values())

    def artists(self) -> Tuple[Artist, ...]:
        return tuple(self._artists.values())

    def albums(self) -> Tuple[Album, ...]:
        return tuple(self._albums.values())

    def songs(self) -> Tuple[Song, ...]:
        return tuple(self._songs.values())

    def playlists(self) -> Tuple[Playlist, ...]:
        return tuple(self._playlists.values())

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_user(self, mobile: str) -> Optional[User]:
        return self._first(self._users, self._user_mobile_index.get(mobile))

    def find_artist(self, name: str) -> Optional[Artist]:
        if name is None:
            return None
        return self._first(self._artists, self._artist_name_index.get(_fold(name)))

    def find_album(self, title: str) -> Optional[Album]:
        if title is None:
            return None
        album_id = self._album_title_index.get(_fold(title))
        return self._albums.get(album_id) if album_id else None

    def find_song(self, title: str) -> Optional[Song]:
        if title is None:
            return None
        return self._first(self._songs, self._song_title_index.get(_fold(title)))

    def find_playlist_by_title(self, title: str) -> Optional[Playlist]:
        if title is None:
            return None
        return self._first(self._playlists, self._playlist_title_index.get(_fold(title)))

    # ------------------------------------------------------------------
    # Relationships
    # ------------------------------------------------------------------

    def artist_albums(self, artist: Artist) -> Tuple[Album, ...]:
        self._require_held(self._artists, artist)
        return self._resolve(self._albums, self._artist_albums[artist.id])

    def album_artist(self, album: Album) -> Artist:
        self._require_held(self._albums, album)
        return self._artists[self._album_artist[album.id]]

    def album_songs(self, album: Album) -> Tuple[Song, ...]:
        self._require_held(self._albums, album)
        return self._resolve(self._songs, self._album_songs[album.id])

    def song_album(self, song: Song) -> Album:
        self._require_held(self._songs, song)
        return self._albums[self._song_album[song.id]]

    def playlist_songs(self, playlist: Playlist) -> Tuple[Song, ...]:
        self._require_held(self._playlists, playlist)
        return self._resolve(self._songs, self._playlist_songs[playlist.id])

    def playlist_listeners(self, playlist: Playlist) -> Tuple[User, ...]:
        self._require_held(self._playlists, playlist)
        return self._resolve(self._users, self._playlist_listeners[playlist.id])

    def playlist_creator(self, playlist: Playlist) -> User:
        self._require_held(self._playlists, playlist)
        return self._users[self._playlist_creator[playlist.id]]

    def playlists_created_by(self, user: User) -> Tuple[Playlist, ...]:
        self._require_held(self._users, user)
        return self._resolve(self._playlists, self._creator_playlists[user.id])

    def user_playlists(self, user: User) -> Tuple[Playlist, ...]:
        self._require_held(self._users, user)
        return self._resolve(self._playlists, self._user_playlists[user.id])

    def song_likers(self, song: Song) -> Tuple[User, ...]:
        self._require_held(self._songs, song)
        return self._resolve(self._users, self._song_likers[song.id])

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _add_artist(self, name: str) -> Artist:
        artist = Artist(name=name)
        self._artists[artist.id] = artist
        self._artist_name_index.setdefault(_fold(name), []).append(artist.id)
        self._artist_albums[artist.id] = []
        return artist

    def _add_playlist(self, creator: User, title: str, songs: List[Song]) -> Playlist:
        playlist = Playlist(title=title)
        self._playlists[playlist.id] = playlist
        self._playlist_title_index.setdefault(_fold(title), []).append(playlist.id)
        self._playlist_songs[playlist.id] = [song.id for song in songs]
        self._playlist_listeners[playlist.id] = [creator.id]
        self._playlist_creator[playlist.id] = creator.id
        self._creator_playlists[creator.id].append(playlist.id)
        self._link_user_playlist(creator, playlist)
        return playlist

    def _link_user_playlist(self, user: User, playlist: Playlist) -> None:
        playlists = self._user_playlists[user.id]
        if playlist.id not in playlists:
            playlists.append(playlist.id)

    def _require_user(self, mobile: str) -> User:
        user = self.find_user(mobile)
        if user is None:
            raise NotFoundError(f"User does not exist: {mobile}")
        return user

    @staticmethod
    def _require_held(entities: Dict[str, T], entity: T) -> None:
        held = entities.get(getattr(entity, "id", None))
        if held is None or held is not entity:
            raise NotFoundError(f"{type(entity).__name__} is not held by this store")

    @staticmethod
    def _is_positive_int(value: Any) -> bool:
        return isinstance(value, int) and not isinstance(value, bool) and value > 0

    @staticmethod
    def _first(entities: Dict[str, T], ids: Optional[List[str]]) -> Optional[T]:
        return entities[ids[0]] if ids else None

    @staticmethod
    def _resolve(entities: Dict[str, T], ids: List[str]) -> Tuple[T, ...]:
        return tuple(entities[entity_id] for entity_id in ids)
