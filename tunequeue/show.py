"""Podcast shows built from web API objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tunequeue.episode import Episode

_SHARE_BASE = "https://open.spotify.com/show/"
_NERDFONT_CHECK = "\U000f012c "
_PLAIN_CHECK = "✓ "


@dataclass
class Show:
    """A podcast show, optionally with its loaded episodes."""

    id: str
    uri: str
    name: str
    publisher: str = ""
    description: str = ""
    cover_url: str | None = None
    episodes: list[Episode] | None = None

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Show:
        """Build a show from a web API show object (simplified or full)."""
        show_id = data["id"]
        images = data.get("images") or []
        return cls(
            id=show_id,
            uri=f"spotify:show:{show_id}",
            name=data["name"],
            publisher=data.get("publisher", ""),
            description=data.get("description", ""),
            cover_url=images[0]["url"] if images else None,
        )

    def __str__(self) -> str:
        return f"{self.publisher} - {self.name}"

    def share_url(self) -> str:
        """The public link to this show."""
        return f"{_SHARE_BASE}{self.id}"

    def display_right(self, saved: bool, use_nerdfont: bool = False) -> str:
        """Right-hand column: the saved marker, or nothing."""
        if not saved:
            return ""
        return _NERDFONT_CHECK if use_nerdfont else _PLAIN_CHECK