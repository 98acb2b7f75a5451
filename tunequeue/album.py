"""Albums built from web API objects."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tunequeue.artist import Artist
from tunequeue.track import Track

_SHARE_BASE = "https://open.spotify.com/album/"
_NERDFONT_CHECK = "\U000f012c "
_PLAIN_CHECK = "✓ "


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass
class Album:
    """An album, optionally with its loaded tracks."""

    id: str | None
    title: str
    artists: list[str] = field(default_factory=list)
    artist_ids: list[str] = field(default_factory=list)
    year: str = ""
    cover_url: str | None = None
    url: str | None = None
    tracks: list[Track] | None = None
    added_at: datetime | None = None
    total_tracks: int | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Album:
        """Build an album from a web API album object.

        A full album carries a ``tracks`` page; its tracks are loaded and its
        ``url`` is the album URI. A simplified album keeps ``tracks`` empty
        and uses the share link as ``url``.
        """
        album_id = data.get("id")
        raw_artists = data.get("artists") or []
        images = data.get("images") or []
        release_date = data.get("release_date") or ""
        album = cls(
            id=album_id,
            title=data["name"],
            artists=[a["name"] for a in raw_artists],
            artist_ids=[a["id"] for a in raw_artists if a.get("id") is not None],
            year=release_date.split("-")[0],
            cover_url=images[0]["url"] if images else None,
        )

        page = data.get("tracks")
        if page is not None:
            album.url = f"spotify:album:{album_id}"
            album.tracks = [Track.from_simplified(item, data) for item in page.get("items") or []]
            album.total_tracks = page.get("total", len(album.tracks))
        elif album_id is not None:
            album.url = f"{_SHARE_BASE}{album_id}"
        return album

    @classmethod
    def from_saved(cls, data: Mapping[str, Any]) -> Album:
        """Build an album from a saved-album object, keeping when it was added."""
        album = cls.from_api(data["album"])
        album.added_at = _parse_timestamp(data["added_at"])
        return album

    def __str__(self) -> str:
        return f"{', '.join(self.artists)} - {self.title}"

    def __repr__(self) -> str:
        return f"({', '.join(self.artists)} - {self.title} ({self.id!r}))"

    def share_url(self) -> str | None:
        """The public link to this album, if it has an id."""
        if self.id is None:
            return None
        return f"{_SHARE_BASE}{self.id}"

    def artist_entries(self) -> list[Artist]:
        """The album's artists that have ids, paired with their names."""
        return [Artist(artist_id, name) for artist_id, name in zip(self.artist_ids, self.artists)]

    def is_playing(self, queued_ids: Iterable[str | None]) -> bool:
        """True when the queue holds exactly this album's loaded tracks."""
        if self.tracks is None:
            return False
        ids = [track.id for track in self.tracks if track.id is not None]
        playing = [item_id for item_id in queued_ids if item_id is not None]
        return bool(ids) and playing == ids

    def display_right(self, saved: bool, use_nerdfont: bool = False) -> str:
        """Right-hand column: saved marker followed by the release year."""
        marker = ""
        if saved:
            marker = _NERDFONT_CHECK if use_nerdfont else _PLAIN_CHECK
        return f"{marker}{self.year}"