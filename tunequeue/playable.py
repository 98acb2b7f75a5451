"""Items that can be queued and played: tracks and podcast episodes."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Union

from tunequeue.episode import Episode
from tunequeue.track import Track

Playable = Union[Track, Episode]

_NERDFONT_CHECK = "\U000f012c"
_PLAIN_CHECK = "✓"

_KINDS: dict[str, type] = {"Track": Track, "Episode": Episode}


def _duration_str(milliseconds: int) -> str:
    total_seconds = milliseconds // 1000
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02}:{seconds:02}"
    return f"{minutes}:{seconds:02}"


def playable_from_item(data: Mapping[str, Any]) -> Playable:
    """Build a track or an episode from a web API playlist item."""
    kind = data.get("type", "track")
    if kind == "track":
        return Track.from_api(data)
    if kind == "episode":
        return Episode.from_api(data)
    raise ValueError(f"unsupported playable item type: {kind!r}")


def playable_title(playable: Playable) -> str:
    """The title of a track or the name of an episode."""
    if isinstance(playable, Track):
        return playable.title
    return playable.name


def format_playable(
    playable: Playable, formatting: str, saved: bool, use_nerdfont: bool = False
) -> str:
    """Fill the placeholders of ``formatting`` with details of ``playable``.

    Supported placeholders are ``%artists``, ``%title``, ``%album``,
    ``%saved`` and ``%duration``; they are replaced in that order.
    """
    if isinstance(playable, Track):
        artists = ", ".join(artist.name for artist in playable.artist_entries())
        album = playable.album or ""
    else:
        artists = ""
        album = ""

    if saved:
        saved_marker = _NERDFONT_CHECK if use_nerdfont else _PLAIN_CHECK
    else:
        saved_marker = ""

    return (
        formatting.replace("%artists", artists)
        .replace("%title", playable_title(playable))
        .replace("%album", album)
        .replace("%saved", saved_marker)
        .replace("%duration", _duration_str(playable.duration))
    )


def playable_to_dict(playable: Playable) -> dict[str, Any]:
    """A plain mapping of ``playable``, tagged with its kind under ``type``."""
    fields = dataclasses.asdict(playable)
    if isinstance(fields.get("added_at"), datetime):
        fields["added_at"] = fields["added_at"].isoformat()
    return {"type": type(playable).__name__, **fields}


def playable_from_dict(data: Mapping[str, Any]) -> Playable:
    """Rebuild a track or episode from a mapping made by :func:`playable_to_dict`."""
    kind = data.get("type")
    cls = _KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        raise ValueError(f"unknown playable type: {kind!r}")

    names = {f.name for f in dataclasses.fields(cls)}
    values = {key: value for key, value in data.items() if key in names}
    added_at = values.get("added_at")
    if added_at is not None and not isinstance(added_at, datetime):
        values["added_at"] = datetime.fromisoformat(str(added_at).replace("Z", "+00:00"))
    try:
        return cls(**values)
    except TypeError as exc:
        raise ValueError(f"incomplete {kind} data: {exc}") from None