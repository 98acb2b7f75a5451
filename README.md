# tunequeue

`tunequeue` provides the building blocks of a terminal music client:

- media models for tracks, episodes, albums, artists, shows, playlists and browse categories
- recognition of Spotify URIs and `open.spotify.com` share links
- helpers for reading and writing configuration and state files as TOML or CBOR

## Installation

```
pip install tunequeue
```

To run the test suite:

```
pip install "tunequeue[test]"
pytest
```

## Modules

### `tunequeue.uri`

- `UriType` is an enum with the members `ALBUM`, `ARTIST`, `TRACK`, `PLAYLIST`, `SHOW` and `EPISODE`.
- `UriType.from_uri(uri)` classifies a `spotify:…` URI. It raises `UriParseError`, a subclass of `ValueError`, when the URI is not recognised.
- `SpotifyUrl(id, uri_type)` is built with `SpotifyUrl.from_url(url)`. That function understands:
  - `open.spotify.com` links,
  - links with an `intl-xx/` prefix,
  - the older `user/<name>/playlist/<id>` form.

  It returns `None` for anything else. `str()` on a `SpotifyUrl` gives back the share link.

### Media models

Each model is a dataclass. Most are built from a web API response with `from_api(data)`.

- `tunequeue.track.Track`
  - Built with `from_api`, `from_simplified(data, album)` and `from_saved`.
  - Has `share_url()` and `artist_entries()`.
  - `is_playing(current)` tells whether a given item is this track.
- `tunequeue.episode.Episode`
  - Has `from_api`, `share_url()` and `is_playing(current)`.
- `tunequeue.artist.Artist`
  - Has `from_api`, `share_url()` and `is_playing(queued_ids)`.
  - `display_right(followed, use_nerdfont)` gives the right-hand column text.
- `tunequeue.album.Album`
  - Built with `from_api` and `from_saved`.
  - A full album object loads its tracks.
  - Also has `share_url()`, `artist_entries()`, `is_playing(queued_ids)` and `display_right(saved, use_nerdfont)`.
- `tunequeue.show.Show`
  - Has `from_api`, `share_url()` and `display_right(saved, use_nerdfont)`.
- `tunequeue.category.Category`
  - Has `from_api` and `share_url()`.
- `tunequeue.playlist.Playlist`
  - Built with `from_api`.
  - `has_track(track_id)` checks the loaded items for an id.
  - `sort(key, direction)` sorts by a `SortKey` (`TITLE`, `DURATION`, `ALBUM`, `ADDED`, `ARTIST`) in a `SortDirection` (`ASCENDING`, `DESCENDING`).
  - Also has `display_left(hide_owner)`, `display_right(saved, use_nerdfont)`, `share_url()` and `is_playing(queued_ids)`.

### `tunequeue.playable`

Helpers for an item that is either a `Track` or an `Episode`:

- `playable_from_item(data)` builds a track or an episode from a web API playlist item.
- `playable_title(playable)` returns the track title or the episode name.
- `format_playable(playable, formatting, saved, use_nerdfont)` fills in the `%artists`, `%title`, `%album`, `%saved` and `%duration` placeholders.
- `playable_to_dict(playable)` and `playable_from_dict(data)` convert to and from plain mappings tagged with `type`.

### `tunequeue.serialization`

- `TomlSerializer` and `CborSerializer`, with ready instances `TOML` and `CBOR`, provide `load(path)` and `write(path, value)`.
- `load_or_generate_default(path, default, default_on_parse_failure)` writes `default()` when the file is missing. When the file cannot be parsed, it either replaces the file with `default()` or raises an error, depending on `default_on_parse_failure`.
- Every failure raises `SerializationError`.

## Example

```python
from tunequeue.uri import SpotifyUrl, UriType
from tunequeue.track import Track
from tunequeue.playable import format_playable

url = SpotifyUrl.from_url("https://open.spotify.com/track/6fRJg3R90w0juYoCJXxj2d")
assert url.uri_type is UriType.TRACK
print(url)  # https://open.spotify.com/track/6fRJg3R90w0juYoCJXxj2d

assert UriType.from_uri("spotify:album:29F5MF6Q9VYlryDsYEQz6a") is UriType.ALBUM

track = Track(
    id="abc",
    uri="spotify:track:abc",
    title="Song",
    duration=185000,
    artists=["Band"],
    artist_ids=["1"],
)
print(format_playable(track, "%artists - %title (%duration)", saved=False))
# Band - Song (3:05)
```

## What the package does not do

`tunequeue` contains only data models and helpers. It does not:

- play audio,
- keep a playback queue,
- track the player's status,
- talk to the web API over the network,
- expose a D-Bus/MPRIS service,
- provide a command or a user interface.

Models are built from API responses that you fetch yourself, and their `display_*` methods only return text.