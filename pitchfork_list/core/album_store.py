# =============================================================================
# core/album_store.py  -  Album Store (load once, read forever)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Fetches the raw album collection from a key-value source, validates every
#   record, sorts the albums by rank and holds them for the lifetime of the
#   server process.
#
# THE KEY-VALUE SOURCE:
#   The store doesn't care where the list lives.  Anything with a
#   get(key) -> value method will do (see KeyValueSource below).  The server
#   uses JsonFileSource, which reads a JSON document shaped like:
#
#       {"albums": [{"artist": ..., "album": ..., "rank": 1, ...}, ...]}
#
# WRITE-ONCE:
#   AlbumStore has no update method.  The albums are kept in a tuple of frozen
#   dataclasses, so every tool call can share the same store without locks.
# =============================================================================

import json
import logging
from pathlib import Path
from typing import Iterator, Protocol

from pitchfork_list.core.models import Album

logger = logging.getLogger(__name__)

ALBUMS_KEY = "albums"


class DataUnavailable(RuntimeError):
    """The album collection could not be loaded; the server must not start."""


class KeyValueSource(Protocol):
    """Anything that can hand back a stored value by key (None if absent)."""

    def get(self, key: str) -> object | None: ...


class JsonFileSource:
    """Key-value source backed by a single JSON document on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get(self, key: str) -> object | None:
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise DataUnavailable(f"Album data file not found: {self.path}") from e
        except json.JSONDecodeError as e:
            raise DataUnavailable(f"Album data file is not valid JSON: {self.path} ({e})") from e

        if not isinstance(document, dict):
            raise DataUnavailable(f"Album data file must contain a JSON object: {self.path}")
        return document.get(key)


class AlbumStore:
    """The immutable, rank-sorted album collection."""

    def __init__(self, albums: tuple[Album, ...]):
        self._albums = albums

    @classmethod
    def load(cls, source: KeyValueSource, key: str = ALBUMS_KEY) -> "AlbumStore":
        """Fetch, validate and rank-sort the collection stored under ``key``.

        Raises:
            DataUnavailable: If the source has no value for the key, the value
                is not a list, or any record is malformed.
        """
        raw = source.get(key)
        if raw is None:
            raise DataUnavailable(f"Albums data not found under key {key!r}")
        if not isinstance(raw, list):
            raise DataUnavailable(
                f"Albums data under key {key!r} must be a list, got {type(raw).__name__}"
            )

        albums = []
        for index, record in enumerate(raw):
            try:
                albums.append(Album.from_record(record))
            except ValueError as e:
                raise DataUnavailable(f"Malformed album record at index {index}: {e}") from e

        albums.sort(key=lambda a: a.rank)
        logger.info("Loaded %d albums from key %r", len(albums), key)
        return cls(tuple(albums))

    @property
    def albums(self) -> tuple[Album, ...]:
        return self._albums

    def __len__(self) -> int:
        return len(self._albums)

    def __iter__(self) -> Iterator[Album]:
        return iter(self._albums)
