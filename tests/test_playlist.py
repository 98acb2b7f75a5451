from datetime import datetime, timezone

import pytest

from tunequeue.episode import Episode
from tunequeue.playlist import Playlist, SortDirection, SortKey
from tunequeue.track import Track

PLAYLIST_DATA = {
    "id": "1XFxe8bkTryTODn0lk4CNa",
    "name": "Road Trip",
    "owner": {"id": "someone", "display_name": "Someone"},
    "snapshot_id": "snap",
    "tracks": {"total": 12},
    "collaborative": True,
}


def make_track(tid, title="x", **kwargs):
    return Track(id=tid, uri=f"spotify:track:{tid}", title=title, **kwargs)


def make_playlist(tracks=None):
    playlist = Playlist.from_api(PLAYLIST_DATA)
    playlist.tracks = tracks
    return playlist


def ids(playlist):
    return [t.id for t in playlist.tracks]


def test_from_api_fields():
    playlist = Playlist.from_api(PLAYLIST_DATA)
    assert playlist.id == PLAYLIST_DATA["id"]
    assert playlist.name == "Road Trip"
    assert playlist.owner_id == "someone"
    assert playlist.owner_name == "Someone"
    assert playlist.snapshot_id == "snap"
    assert playlist.num_tracks == 12
    assert playlist.collaborative is True
    assert playlist.tracks is None


def test_has_track():
    playlist = make_playlist([make_track("a"), make_track("b")])
    assert playlist.has_track("b")
    assert not playlist.has_track("c")
    assert not make_playlist(None).has_track("a")


def test_sort_by_title_ignores_case():
    playlist = make_playlist(
        [make_track("1", "charlie"), make_track("2", "Alpha"), make_track("3", "bravo")]
    )
    playlist.sort(SortKey.TITLE, SortDirection.ASCENDING)
    assert ids(playlist) == ["2", "3", "1"]
    playlist.sort(SortKey.TITLE, SortDirection.DESCENDING)
    assert ids(playlist) == ["1", "3", "2"]


def test_sort_by_duration():
    playlist = make_playlist(
        [make_track("1", duration=300), make_track("2", duration=100), make_track("3", duration=200)]
    )
    playlist.sort(SortKey.DURATION, SortDirection.ASCENDING)
    durations = [t.duration for t in playlist.tracks]
    assert durations == sorted(durations)


def test_sort_by_album_then_disc_and_number():
    playlist = make_playlist(
        [
            make_track("1", album="B", disc_number=1, track_number=1),
            make_track("2", album="a", disc_number=2, track_number=1),
            make_track("3", album="A", disc_number=1, track_number=2),
            make_track("4", album=None),
        ]
    )
    playlist.sort(SortKey.ALBUM, SortDirection.ASCENDING)
    assert ids(playlist) == ["4", "3", "2", "1"]


def test_sort_by_artist_skips_leading_the():
    playlist = make_playlist(
        [make_track("blur", artists=["Blur"]), make_track("animals", artists=["The Animals"])]
    )
    playlist.sort(SortKey.ARTIST, SortDirection.ASCENDING)
    assert ids(playlist) == ["animals", "blur"]


def test_sort_by_added_puts_missing_first():
    early = datetime(2020, 1, 1, tzinfo=timezone.utc)
    late = datetime(2021, 1, 1, tzinfo=timezone.utc)
    playlist = make_playlist(
        [make_track("late", added_at=late), make_track("none"), make_track("early", added_at=early)]
    )
    playlist.sort(SortKey.ADDED, SortDirection.ASCENDING)
    assert ids(playlist) == ["none", "early", "late"]
    playlist.sort(SortKey.ADDED, SortDirection.DESCENDING)
    assert ids(playlist) == ["late", "early", "none"]


def test_sort_keeps_all_items():
    episode = Episode(id="ep", uri="spotify:episode:ep", name="Episode")
    playlist = make_playlist([make_track("b", "b"), episode, make_track("a", "a")])
    playlist.sort(SortKey.TITLE, SortDirection.ASCENDING)
    assert sorted(ids(playlist)) == ["a", "b", "ep"]


def test_sort_without_tracks_is_noop():
    playlist = make_playlist(None)
    playlist.sort(SortKey.TITLE, SortDirection.ASCENDING)
    assert playlist.tracks is None


@pytest.mark.parametrize("hide, expected", [(False, "Road Trip • Someone"), (True, "Road Trip")])
def test_display_left(hide, expected):
    assert make_playlist().display_left(hide) == expected


def test_display_left_without_owner_name():
    playlist = make_playlist()
    playlist.owner_name = None
    assert playlist.display_left(False) == "Road Trip"


def test_display_right_uses_loaded_tracks_when_present():
    assert make_playlist(None).display_right(False) == "  12 tracks"
    loaded = make_playlist([make_track("a"), make_track("b")])
    assert loaded.display_right(True).startswith("✓ ")
    assert loaded.display_right(True).endswith(" 2 tracks")
    assert loaded.display_right(True, True).startswith("\U000f012c ")


def test_share_url():
    assert (
        make_playlist().share_url()
        == "https://open.spotify.com/user/someone/playlist/1XFxe8bkTryTODn0lk4CNa"
    )


def test_is_playing():
    playlist = make_playlist([make_track("a"), make_track("b")])
    assert playlist.is_playing(["a", None, "b"])
    assert not playlist.is_playing(["b", "a"])
    assert not make_playlist([]).is_playing([])
    assert not make_playlist(None).is_playing(["a"])