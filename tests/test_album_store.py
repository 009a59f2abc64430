"""
Tests for pitchfork_list.core.album_store and the Album model.

These tests verify:
- Album.from_record parsing and rejection of malformed records
- AlbumStore.load sorting and fatal-failure behavior
- JsonFileSource reading, including the bundled data file
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import SAMPLE_RECORDS, StaticSource
from pitchfork_list.config import DEFAULT_DATA_PATH
from pitchfork_list.core.album_store import AlbumStore, DataUnavailable, JsonFileSource
from pitchfork_list.core.models import Album

# =============================================================================
# Album.from_record
# =============================================================================


class TestAlbumFromRecord:
    def test_full_record(self) -> None:
        album = Album.from_record(
            {"artist": "Burial", "album": "Untrue", "rank": 4, "year": "2007", "genres": ["Dubstep"]}
        )
        assert album == Album(artist="Burial", album="Untrue", rank=4, year="2007", genres=("Dubstep",))

    def test_missing_year_and_genres(self) -> None:
        album = Album.from_record({"artist": "A", "album": "B", "rank": 1, "year": ""})
        assert album.year is None
        assert album.genres == ()

    def test_duplicate_genres_are_kept(self) -> None:
        album = Album.from_record({"artist": "A", "album": "B", "rank": 1, "genres": ["x", "x"]})
        assert album.genres == ("x", "x")

    @pytest.mark.parametrize(
        "record",
        [
            {"album": "B", "rank": 1},
            {"artist": "", "album": "B", "rank": 1},
            {"artist": "A", "rank": 1},
            {"artist": "A", "album": "B"},
            {"artist": "A", "album": "B", "rank": "1"},
            {"artist": "A", "album": "B", "rank": True},
            {"artist": "A", "album": "B", "rank": 1, "genres": "Rock"},
            {"artist": "A", "album": "B", "rank": 1, "genres": [1, 2]},
            {"artist": "A", "album": "B", "rank": 1, "genres": 5},
            {"artist": "A", "album": "B", "rank": 1, "genres": {"Rock": 1}},
            ["not", "a", "mapping"],
        ],
    )
    def test_malformed_records_rejected(self, record) -> None:
        with pytest.raises(ValueError):
            Album.from_record(record)

    def test_to_dict_wire_shape(self) -> None:
        album = Album(artist="A", album="B", rank=3, year=None, genres=("x", "y"))
        assert album.to_dict() == {
            "artist": "A",
            "album": "B",
            "rank": 3,
            "year": None,
            "genres": ["x", "y"],
        }


# =============================================================================
# AlbumStore
# =============================================================================


class TestAlbumStore:
    def test_load_sorts_by_rank(self, sample_store: AlbumStore) -> None:
        ranks = [album.rank for album in sample_store]
        assert ranks == sorted(ranks)
        assert len(sample_store) == len(SAMPLE_RECORDS)

    def test_albums_is_immutable_tuple(self, sample_store: AlbumStore) -> None:
        assert isinstance(sample_store.albums, tuple)

    def test_reads_albums_key_by_default(self) -> None:
        source = StaticSource({"albums": SAMPLE_RECORDS})
        AlbumStore.load(source)
        assert source.requested == ["albums"]

    def test_custom_key(self) -> None:
        store = AlbumStore.load(StaticSource({"top200": SAMPLE_RECORDS}), key="top200")
        assert len(store) == len(SAMPLE_RECORDS)

    def test_missing_collection_is_fatal(self) -> None:
        with pytest.raises(DataUnavailable, match="not found"):
            AlbumStore.load(StaticSource({}))

    def test_non_list_collection_is_fatal(self) -> None:
        with pytest.raises(DataUnavailable, match="must be a list"):
            AlbumStore.load(StaticSource({"albums": {"rank": 1}}))

    def test_malformed_record_is_fatal(self) -> None:
        records = [SAMPLE_RECORDS[0], {"artist": "A", "album": "B"}]
        with pytest.raises(DataUnavailable, match="index 1"):
            AlbumStore.load(StaticSource({"albums": records}))

    def test_scalar_genres_is_fatal(self) -> None:
        records = [{"artist": "A", "album": "B", "rank": 1, "genres": 5}]
        with pytest.raises(DataUnavailable, match="index 0"):
            AlbumStore.load(StaticSource({"albums": records}))

    def test_empty_collection_loads(self) -> None:
        assert len(AlbumStore.load(StaticSource({"albums": []}))) == 0


# =============================================================================
# JsonFileSource
# =============================================================================


class TestJsonFileSource:
    def test_reads_key(self, tmp_path: Path) -> None:
        path = tmp_path / "albums.json"
        path.write_text(json.dumps({"albums": SAMPLE_RECORDS}), encoding="utf-8")

        store = AlbumStore.load(JsonFileSource(path))
        assert store.albums[0].album == "Kid A"

    def test_absent_key_returns_none(self, tmp_path: Path) -> None:
        path = tmp_path / "albums.json"
        path.write_text("{}", encoding="utf-8")
        assert JsonFileSource(path).get("albums") is None

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DataUnavailable, match="not found"):
            JsonFileSource(tmp_path / "nope.json").get("albums")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "albums.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(DataUnavailable, match="not valid JSON"):
            JsonFileSource(path).get("albums")

    def test_non_object_document(self, tmp_path: Path) -> None:
        path = tmp_path / "albums.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(DataUnavailable, match="JSON object"):
            JsonFileSource(path).get("albums")

    def test_bundled_data_file(self) -> None:
        store = AlbumStore.load(JsonFileSource(DEFAULT_DATA_PATH))
        ranks = [album.rank for album in store]
        assert len(store) > 0
        assert len(set(ranks)) == len(ranks)
        assert all(album.year is None or len(album.year) == 4 for album in store)
