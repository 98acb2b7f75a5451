"""Playlists and how their tracks are sorted and displayed."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any

from tunequeue.episode import Episode
from tunequeue.track import Track

_NERDFONT_CHECK = "\U000f012c "
_PLAIN_CHECK = "✓ "


class SortKey(Enum):
    """The attribute playlist tracks are sorted by."""

    TITLE = "title"
    DURATION = "duration"
    ALBUM = "album"
    ADDED = "added"
    ARTIST = "artist"


class SortDirection(Enum):
    """Ascending or descending sort order."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def _optional(value: Any) -> tuple:
    # Absent values sort before present ones.
    return (0,) if value is None else (1, value)


def _artists_key(artists: list[str]) -> list[str]:
    sanitized = []
    for name in artists:
        words = name.lower().split(" ")
        while words and words[0] == "the":
            words.pop(0)
        sanitized.append("".join(words))
    return sanitized


def _album_key(track: Track) -> tuple:
    album = track.album.lower() if track.album is not None else None
    return (_optional(album), track.disc_number, track.track_number)


_SORT_KEYS: dict[SortKey, Callable[[Track], Any]] = {
    SortKey.TITLE: lambda t: t.title.lower(),
    SortKey.DURATION: lambda t: t.duration,
    SortKey.ALBUM: _album_key,
    SortKey.ADDED: lambda t: _optional(t.added_at),
    SortKey.ARTIST: lambda t: (_artists_key(t.artists), _album_key(t)),
}


@dataclass
class Playlist:
    """A playlist, optionally with its loaded tracks and episodes."""

    id: str
    name: str
    owner_id: str
    owner_name: str | None = None
    snapshot_id: str = ""
    num_tracks: int = 0
    tracks: list[Track | Episode] | None = None
    collaborative: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Playlist:
        """Build a playlist from a web API playlist object (simplified or full)."""
        owner = data["owner"]
        return cls(
            id=data["id"],
            name=data["name"],
            owner_id=owner["id"],
            owner_name=owner.get("display_name"),
            snapshot_id=data.get("snapshot_id", ""),
            num_tracks=(data.get("tracks") or {}).get("total", 0),
            collaborative=data.get("collaborative", False),
        )

    def has_track(self, track_id: str) -> bool:
        """True when the loaded items include one with ``track_id``."""
        if self.tracks is None:
            return False
        return any(item.id == track_id for item in self.tracks)

    def sort(self, key: SortKey, direction: SortDirection) -> None:
        """Sort loaded items in place; episodes compare equal to everything."""
        if self.tracks is None:
            return
        key_of = _SORT_KEYS[key]
        descending = direction is SortDirection.DESCENDING

        def compare(a: Track | Episode, b: Track | Episode) -> int:
            if not (isinstance(a, Track) and isinstance(b, Track)):
                return 0
            if descending:
                a, b = b, a
            ka, kb = key_of(a), key_of(b)
            return (ka > kb) - (ka < kb)

        self.tracks.sort(key=cmp_to_key(compare))

    def display_left(self, hide_owner: bool = False) -> str:
        """Left-hand column: the name, followed by the owner unless hidden."""
        if self.owner_name is not None and not hide_owner:
            return f"{self.name} • {self.owner_name}"
        return self.name

    def display_right(self, saved: bool, use_nerdfont: bool = False) -> str:
        """Right-hand column: saved marker and number of tracks."""
        marker = ""
        if saved:
            marker = _NERDFONT_CHECK if use_nerdfont else _PLAIN_CHECK
        count = len(self.tracks) if self.tracks is not None else self.num_tracks
        return f"{marker}{count:>4} tracks"

    def share_url(self) -> str:
        """The public link to this playlist."""
        return f"https://open.spotify.com/user/{self.owner_id}/playlist/{self.id}"

    def is_playing(self, queued_ids: Iterable[str | None]) -> bool:
        """True when the queue holds exactly this playlist's loaded items."""
        if self.tracks is None:
            return False
        ids = [item.id for item in self.tracks if item.id is not None]
        playing = [item_id for item_id in queued_ids if item_id is not None]
        return bool(ids) and playing == ids