"""Media models, Spotify URI and link parsing, and TOML/CBOR file helpers for a music client."""

__version__ = "0.1.0"