"""Podcast episodes built from web API objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

_SHARE_BASE = "https://open.spotify.com/episode/"


@dataclass
class Episode:
    """A single podcast episode."""

    id: str
    uri: str
    name: str
    duration: int = 0
    description: str = ""
    release_date: str = ""
    cover_url: str | None = None
    added_at: datetime | None = None
    list_index: int = 0

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Episode:
        """Build an episode from a web API episode object (simplified or full)."""
        episode_id = data["id"]
        images = data.get("images") or []
        return cls(
            id=episode_id,
            uri=f"spotify:episode:{episode_id}",
            name=data["name"],
            duration=data.get("duration_ms", 0),
            description=data.get("description", ""),
            release_date=data.get("release_date", ""),
            cover_url=images[0]["url"] if images else None,
        )

    def __str__(self) -> str:
        return self.name

    def share_url(self) -> str:
        """The public link to this episode."""
        return f"{_SHARE_BASE}{self.id}"

    def is_playing(self, current: Any) -> bool:
        """True when ``current`` (the playing item, or None) has this episode's id."""
        return current is not None and current.id == self.id