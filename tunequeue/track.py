"""Music tracks built from web API objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from tunequeue.artist import Artist

_SHARE_BASE = "https://open.spotify.com/track/"


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


def _first_image(images: Any) -> str | None:
    return images[0]["url"] if images else None


@dataclass
class Track:
    """A single track with the album details needed for display."""

    id: str | None
    uri: str
    title: str
    track_number: int = 0
    disc_number: int = 0
    duration: int = 0
    artists: list[str] = field(default_factory=list)
    artist_ids: list[str] = field(default_factory=list)
    album: str | None = None
    album_id: str | None = None
    album_artists: list[str] = field(default_factory=list)
    cover_url: str | None = None
    url: str = ""
    added_at: datetime | None = None
    list_index: int = 0
    is_local: bool = False
    is_playable: bool | None = None

    @classmethod
    def _base(cls, data: Mapping[str, Any]) -> Track:
        track_id = data.get("id")
        raw_artists = data.get("artists") or []
        return cls(
            id=track_id,
            uri=f"spotify:track:{track_id}" if track_id is not None else "",
            title=data["name"],
            track_number=data.get("track_number", 0),
            disc_number=data.get("disc_number", 0),
            duration=data.get("duration_ms", 0),
            artists=[a["name"] for a in raw_artists],
            artist_ids=[a["id"] for a in raw_artists if a.get("id") is not None],
            url=f"{_SHARE_BASE}{track_id}" if track_id is not None else "",
            is_local=data.get("is_local", False),
            is_playable=data.get("is_playable"),
        )

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Track:
        """Build a track from a web API track object.

        Full track objects carry an ``album``; simplified ones do not, and
        then the album fields stay empty.
        """
        track = cls._base(data)
        album = data.get("album")
        if album is not None:
            track.album = album["name"]
            track.album_id = album.get("id")
            track.album_artists = [a["name"] for a in album.get("artists") or []]
            track.cover_url = _first_image(album.get("images"))
        return track

    @classmethod
    def from_simplified(cls, data: Mapping[str, Any], album: Mapping[str, Any]) -> Track:
        """Build a track from a simplified track and the full album it belongs to."""
        track = cls._base(data)
        track.album = album["name"]
        track.album_id = album["id"]
        track.album_artists = [a["name"] for a in album.get("artists") or []]
        track.cover_url = _first_image(album.get("images"))
        return track

    @classmethod
    def from_saved(cls, data: Mapping[str, Any]) -> Track:
        """Build a track from a saved-track object, keeping when it was added."""
        track = cls.from_api(data["track"])
        track.added_at = _parse_timestamp(data["added_at"])
        return track

    def __str__(self) -> str:
        return f"{', '.join(self.artists)} - {self.title}"

    def share_url(self) -> str | None:
        """The public link to this track, if it has an id."""
        if self.id is None:
            return None
        return f"{_SHARE_BASE}{self.id}"

    def artist_entries(self) -> list[Artist]:
        """The track's artists that have ids, paired with their names."""
        return [Artist(artist_id, name) for artist_id, name in zip(self.artist_ids, self.artists)]

    def is_playing(self, current: Any) -> bool:
        """True when ``current`` (the playing item, or None) has this track's id."""
        return current is not None and current.id == self.id