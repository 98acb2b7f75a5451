"""Spotify URI types and open.spotify.com links."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

_SHARE_HOST = "open.spotify.com"


class UriParseError(ValueError):
    """Raised when a string is not a recognised Spotify URI."""

    def __init__(self, uri: str = "") -> None:
        super().__init__("invalid Spotify URI")
        self.uri = uri


class UriType(Enum):
    """The kind of item a Spotify URI or link refers to."""

    ALBUM = "album"
    ARTIST = "artist"
    TRACK = "track"
    PLAYLIST = "playlist"
    SHOW = "show"
    EPISODE = "episode"

    @classmethod
    def from_uri(cls, uri: str) -> UriType:
        """Determine the type of a ``spotify:`` URI, raising UriParseError if unknown."""
        if uri.startswith("spotify:album:"):
            return cls.ALBUM
        if uri.startswith("spotify:artist:"):
            return cls.ARTIST
        if uri.startswith("spotify:track:"):
            return cls.TRACK
        if uri.startswith("spotify:") and ":playlist:" in uri:
            return cls.PLAYLIST
        if uri.startswith("spotify:show:"):
            return cls.SHOW
        if uri.startswith("spotify:episode:"):
            return cls.EPISODE
        raise UriParseError(uri)


_ENTITY_TYPES = {member.value: member for member in UriType}


@dataclass(frozen=True)
class SpotifyUrl:
    """An item id together with its type, as found in a share link."""

    id: str
    uri_type: UriType

    def __str__(self) -> str:
        return f"https://{_SHARE_HOST}/{self.uri_type.value}/{self.id}"

    @classmethod
    def from_url(cls, url: str) -> SpotifyUrl | None:
        """Extract the id and type from an open.spotify.com link, or None."""
        try:
            parts = urlsplit(url)
            host = parts.hostname
        except ValueError:
            return None
        if not parts.scheme or host != _SHARE_HOST:
            return None

        path = parts.path
        if not path.startswith("/"):
            return None
        segments = iter(path[1:].split("/"))

        entity = next(segments, None)
        if entity is None:
            return None
        if entity.lower().startswith("intl-"):
            entity = next(segments, None)
            if entity is None:
                return None

        entity = entity.lower()
        if entity == "user":
            if next(segments, None) is None:
                return None
            if next(segments, None) != "playlist":
                return None
            uri_type = UriType.PLAYLIST
        else:
            uri_type = _ENTITY_TYPES.get(entity)
            if uri_type is None:
                return None

        item_id = next(segments, None)
        if item_id is None:
            return None
        return cls(item_id, uri_type)