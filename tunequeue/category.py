"""Browse categories (genres and moods)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_SHARE_BASE = "https://open.spotify.com/genre/"


@dataclass(frozen=True)
class Category:
    """A browse category, identified by its id."""

    id: str
    name: str

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Category:
        """Build a category from a web API category object."""
        return cls(id=data["id"], name=data["name"])

    def __str__(self) -> str:
        return self.name

    def share_url(self) -> str:
        """The public link to this category."""
        return f"{_SHARE_BASE}{self.id}"