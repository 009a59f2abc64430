"""Shared fixtures: a small hand-written collection and a 200-album decade."""

from __future__ import annotations

import pytest

from pitchfork_list.core.album_store import AlbumStore
from pitchfork_list.core.models import Album

SAMPLE_RECORDS = [
    # Deliberately out of rank order; the store must sort them.
    {"artist": "Radiohead", "album": "In Rainbows", "rank": 5, "year": "2007", "genres": ["Art Rock", "Alternative Rock"]},
    {"artist": "Radiohead", "album": "Kid A", "rank": 1, "year": "2000", "genres": ["Electronic", "Art Rock"]},
    {"artist": "OutKast", "album": "Stankonia", "rank": 2, "year": "2000", "genres": ["Hip-Hop", "Funk"]},
    {"artist": "The Static", "album": "Radio", "rank": 7, "year": "2003", "genres": ["indie rock"]},
    {"artist": "Daft Punk", "album": "Discovery", "rank": 3, "year": "2001", "genres": ["Electronic", "house", "Electronic"]},
    {"artist": "Burial", "album": "Untrue", "rank": 4, "year": "2007", "genres": ["Dubstep", "electronic"]},
    {"artist": "Mystery Band", "album": "Lost Tapes", "rank": 6, "year": None, "genres": []},
    {"artist": "radiohead", "album": "Live Bootleg", "rank": 8, "year": "2007", "genres": ["Art Rock"]},
]


class StaticSource:
    """In-memory key-value source for tests."""

    def __init__(self, values: dict):
        self.values = values
        self.requested: list[str] = []

    def get(self, key: str):
        self.requested.append(key)
        return self.values.get(key)


def make_decade_records(size: int = 200) -> list[dict]:
    """``size`` albums; every fifth rank is from 2007, the rest 2001-2004."""
    records = []
    for rank in range(1, size + 1):
        year = "2007" if rank % 5 == 0 else f"200{rank % 5}"
        records.append({
            "artist": f"Artist {rank % 60}",
            "album": f"Album {rank}",
            "rank": rank,
            "year": year,
            "genres": ["Rock", "Indie Rock"] if rank % 2 else ["Electronic"],
        })
    return records


@pytest.fixture
def sample_store() -> AlbumStore:
    return AlbumStore.load(StaticSource({"albums": SAMPLE_RECORDS}))


@pytest.fixture
def sample_albums(sample_store: AlbumStore) -> tuple[Album, ...]:
    return sample_store.albums


@pytest.fixture
def decade_store() -> AlbumStore:
    return AlbumStore.load(StaticSource({"albums": make_decade_records()}))


@pytest.fixture
def decade_albums(decade_store: AlbumStore) -> tuple[Album, ...]:
    return decade_store.albums
