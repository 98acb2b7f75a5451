"""Loading and writing configuration and state files as TOML or CBOR."""

from __future__ import annotations

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path
from typing import Any

import cbor2
import tomli_w

PathLike = str | os.PathLike[str]


class SerializationError(Exception):
    """Raised when a file cannot be read, parsed, encoded or written."""


class Serializer(ABC):
    """Reads and writes values to files in one particular format."""

    @abstractmethod
    def load(self, path: PathLike) -> Any:
        """Read and decode the value stored at ``path``."""

    @abstractmethod
    def write(self, path: PathLike, value: Any) -> Any:
        """Encode ``value`` into ``path`` and return it unchanged."""

    def load_or_generate_default(
        self,
        path: PathLike,
        default: Callable[[], Any],
        default_on_parse_failure: bool = False,
    ) -> Any:
        """Load ``path``, writing and returning ``default()`` when it is missing.

        When the file exists but cannot be loaded, it is overwritten with the
        default if ``default_on_parse_failure`` is true; otherwise a
        SerializationError is raised.
        """
        path = Path(path)
        if not path.exists():
            return self.write(path, default())

        try:
            return self.load(path)
        except SerializationError as exc:
            if default_on_parse_failure:
                return self.write(path, default())
            raise SerializationError(f"Unable to parse {path}: {exc}") from exc


class TomlSerializer(Serializer):
    """TOML files; the top-level value must be a table."""

    def load(self, path: PathLike) -> Any:
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SerializationError(f"Unable to read {path}: {exc}") from exc
        try:
            return tomllib.loads(contents)
        except tomllib.TOMLDecodeError as exc:
            raise SerializationError(f"Unable to parse toml {path}: {exc}") from exc

    def write(self, path: PathLike, value: Any) -> Any:
        try:
            content = tomli_w.dumps(value)
        except (TypeError, ValueError, AttributeError) as exc:
            raise SerializationError(f"Failed serializing value: {exc}") from exc
        try:
            Path(path).write_text(content, encoding="utf-8")
        except OSError as exc:
            raise SerializationError(f"Failed writing content to {path}: {exc}") from exc
        return value


class CborSerializer(Serializer):
    """Binary CBOR files."""

    def load(self, path: PathLike) -> Any:
        try:
            contents = Path(path).read_bytes()
        except OSError as exc:
            raise SerializationError(f"Unable to read {path}: {exc}") from exc
        try:
            return cbor2.loads(contents)
        except (cbor2.CBORDecodeError, ValueError) as exc:
            raise SerializationError(f"Unable to parse CBOR {path}: {exc}") from exc

    def write(self, path: PathLike, value: Any) -> Any:
        try:
            handle = open(path, "wb")
        except OSError as exc:
            raise SerializationError(f"Failed creating file {path}: {exc}") from exc
        with handle:
            try:
                cbor2.dump(value, handle)
            except (cbor2.CBOREncodeError, OSError, TypeError, ValueError) as exc:
                raise SerializationError(
                    f"Failed writing content to {path}: {exc}"
                ) from exc
        return value


TOML = TomlSerializer()
CBOR = CborSerializer()