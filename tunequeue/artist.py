"""Artists as shown in lists and used as recommendation seeds."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tunequeue.track import Track

_SHARE_BASE = "https://open.spotify.com/artist/"
_NERDFONT_CHECK = "\U000f012c "
_PLAIN_CHECK = "✓ "


@dataclass
class Artist:
    """An artist, optionally with its loaded top tracks."""

    id: str | None
    name: str
    url: str | None = None
    tracks: list[Track] | None = None
    is_followed: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Artist:
        """Build an artist from a web API artist object (simplified or full)."""
        artist_id = data.get("id")
        return cls(
            id=artist_id,
            name=data["name"],
            url=f"{_SHARE_BASE}{artist_id}" if artist_id is not None else None,
        )

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.name} ({self.id!r})"

    def share_url(self) -> str | None:
        """The public link to this artist, if it has an id."""
        if self.id is None:
            return None
        return f"{_SHARE_BASE}{self.id}"

    def is_playing(self, queued_ids: Iterable[str | None]) -> bool:
        """True when the queue holds exactly this artist's loaded tracks."""
        if self.tracks is None:
            return False
        ids = [track.id for track in self.tracks if track.id is not None]
        playing = [item_id for item_id in queued_ids if item_id is not None]
        return bool(ids) and playing == ids

    def display_right(self, followed: bool, use_nerdfont: bool = False) -> str:
        """Right-hand column: follow marker and number of loaded tracks."""
        marker = ""
        if followed:
            marker = _NERDFONT_CHECK if use_nerdfont else _PLAIN_CHECK
        tracks = f"{len(self.tracks):>3} saved tracks" if self.tracks is not None else ""
        return f"{marker}{tracks}"