"""Property-based tests for catalog store invariants.

Uses Hypothesis to drive the store with arbitrary sequences of likes, visits
and album creations and checks the invariants that must hold afterwards.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from music_catalog.domain.result import DomainError, InvalidArgumentError
from music_catalog.infrastructure.repositories import InMemoryCatalogStore

MOBILES = ["100", "200", "300", "400"]
SONG_TITLES = ["Intro", "Anthem", "Ballad"]

_titles = st.text(alphabet="abcABC", min_size=1, max_size=4)


def build_store() -> InMemoryCatalogStore:
    store = InMemoryCatalogStore()
    for i, mobile in enumerate(MOBILES):
        store.create_user(f"user{i}", mobile)
    store.create_album("Debut", "Band")
    for length, title in enumerate(SONG_TITLES, start=100):
        store.create_song(title, "Debut", length)
    store.create_playlist_on_length(MOBILES[0], "Mix", 100)
    return store


@settings(max_examples=60)
@given(st.lists(st.tuples(st.sampled_from(MOBILES), st.sampled_from(SONG_TITLES))))
def test_like_counter_matches_distinct_likers(likes: list[tuple[str, str]]) -> None:
    """A song's counter always equals its number of distinct likers."""
    store = build_store()

    for mobile, title in likes:
        store.like_song(mobile, title)

    for song in store.songs():
        likers = store.song_likers(song)
        assert song.likes == len(likers)
        assert len({u.id for u in likers}) == len(likers)
        assert song.likes == len({m for m, t in likes if t == song.title})

    artist = store.find_artist("Band")
    assert artist.likes == sum(song.likes for song in store.songs())


@settings(max_examples=60)
@given(st.lists(st.sampled_from(MOBILES)))
def test_listeners_never_duplicated(visits: list[str]) -> None:
    """Opening a playlist any number of times never duplicates a listener."""
    store = build_store()

    for mobile in visits:
        store.find_playlist(mobile, "mix")

    playlist = store.find_playlist_by_title("Mix")
    listeners = store.playlist_listeners(playlist)
    assert listeners[0].mobile == MOBILES[0]
    assert len({u.id for u in listeners}) == len(listeners)
    assert {u.mobile for u in listeners} == {MOBILES[0], *visits}


@settings(max_examples=60)
@given(st.lists(st.tuples(_titles, st.sampled_from(["X", "Y"])), max_size=15))
def test_album_titles_unique_case_insensitively(requests: list[tuple[str, str]]) -> None:
    """Accepted album titles never collide case-insensitively."""
    store = InMemoryCatalogStore()
    accepted = set()

    for title, artist in requests:
        if title.lower() in accepted:
            with pytest.raises(InvalidArgumentError):
                store.create_album(title, artist)
        else:
            store.create_album(title, artist)
            accepted.add(title.lower())

    assert len(store.albums()) == len(accepted)
    owned = sum(len(store.artist_albums(a)) for a in store.artists())
    assert owned == len(store.albums())


@settings(max_examples=60)
@given(
    st.sampled_from(["create_user", "create_album", "create_song", "like_song", "find_playlist"]),
    st.sampled_from(["", "999", "Nope", "Debut"]),
)
def test_failed_operations_leave_store_unchanged(operation: str, key: str) -> None:
    """Any rejected call leaves every collection and counter as it was."""
    store = build_store()
    before = (store.statistics(), [store.playlist_listeners(p) for p in store.playlists()])

    calls = {
        "create_user": lambda: store.create_user("", key),
        "create_album": lambda: store.create_album("debut", key or "Band"),
        "create_song": lambda: store.create_song("New", key, 0 if key else 10),
        "like_song": lambda: store.like_song(key, "Missing"),
        "find_playlist": lambda: store.find_playlist(key, "Missing"),
    }

    with pytest.raises(DomainError):
        calls[operation]()

    after = (store.statistics(), [store.playlist_listeners(p) for p in store.playlists()])
    assert after == before
