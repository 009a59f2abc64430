# =============================================================================
# core/models.py  -  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that flows
# through the system: the album records themselves, the "not found" marker
# returned by lookups, and the statistics rows handed back to the agent.
#
# IMMUTABILITY:
#   Every model here is frozen.  The album collection is loaded once and then
#   shared by every tool call, so nothing downstream is allowed to change it.
#   Genre tags are stored as a tuple for the same reason.
#
# WIRE SHAPE:
#   Python fields are snake_case.  The to_dict() methods produce the keys the
#   MCP clients see (camelCase for the statistics rows, e.g. "albumCount").
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

# Shape of the list: ranks run 1..MAX_RANK, release years 2000..2009.
MAX_RANK = 200
YEAR_PATTERN = r"^200[0-9]$"


# -----------------------------------------------------------------------------
# Album  -  one ranked entry in the list
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Album:
    """One album in the ranked list.

    Every field comes straight from the source collection:
      - rank    ->  position in the list (1 = best)
      - year    ->  4-digit release year, or None when unknown
      - genres  ->  tags in source order; duplicates are kept
    """

    artist: str
    album: str                         # The album title
    rank: int
    year: Optional[str] = None
    genres: tuple[str, ...] = ()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Album":
        """Build an Album from one raw record of the source collection.

        Raises:
            ValueError: If a required field is missing or has the wrong type.
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"album record must be an object, got {type(record).__name__}")

        artist = record.get("artist")
        title = record.get("album")
        rank = record.get("rank")
        if not isinstance(artist, str) or not artist:
            raise ValueError("album record is missing a non-empty 'artist'")
        if not isinstance(title, str) or not title:
            raise ValueError("album record is missing a non-empty 'album' title")
        # bool is a subclass of int; a rank of True is not a rank.
        if not isinstance(rank, int) or isinstance(rank, bool):
            raise ValueError(f"album record for {artist!r} has no integer 'rank'")

        year = record.get("year") or None
        if year is not None:
            year = str(year)

        genres = record.get("genres")
        if genres is None:
            genres = ()
        if not isinstance(genres, (list, tuple)) or not all(isinstance(g, str) for g in genres):
            raise ValueError(f"album record for {artist!r} has malformed 'genres'")

        return cls(artist=artist, album=title, rank=rank, year=year, genres=tuple(genres))

    def to_dict(self) -> dict:
        return {
            "artist": self.artist,
            "album": self.album,
            "rank": self.rank,
            "year": self.year,
            "genres": list(self.genres),
        }


# -----------------------------------------------------------------------------
# NotFound  -  a successful lookup that matched nothing
# -----------------------------------------------------------------------------
# Lookups that match nothing are NOT errors.  An agent treats a tool error as
# "my call was wrong"; an explanatory message tells it "the call was fine, the
# list just doesn't contain that".  The presentation layer renders the message
# as plain text.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class NotFound:
    """A valid query with zero matches, explained in words."""

    message: str


# -----------------------------------------------------------------------------
# Statistics rows
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class YearStat:
    year: str                          # "2007", or "unknown"
    count: int
    percentage: float                  # Share of all albums, 1 decimal

    def to_dict(self) -> dict:
        return {"year": self.year, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True)
class GenreStat:
    genre: str
    count: int                         # Tag occurrences, not distinct albums
    percentage: float

    def to_dict(self) -> dict:
        return {"genre": self.genre, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True)
class ArtistStat:
    artist: str
    album_count: int
    percentage: float

    def to_dict(self) -> dict:
        return {
            "artist": self.artist,
            "albumCount": self.album_count,
            "percentage": self.percentage,
        }


@dataclass(frozen=True)
class AlbumDistribution:
    """One histogram bar: how many artists placed exactly N albums."""

    albums_per_artist: int
    number_of_artists: int

    def to_dict(self) -> dict:
        return {
            "albumsPerArtist": self.albums_per_artist,
            "numberOfArtists": self.number_of_artists,
        }


@dataclass(frozen=True)
class ArtistSummary:
    """Distribution-level facts about the artists in the list."""

    total_artists: int
    artists_with_multiple_albums: int
    average_albums_per_artist: float
    album_distribution: list[AlbumDistribution] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalArtists": self.total_artists,
            "artistsWithMultipleAlbums": self.artists_with_multiple_albums,
            "averageAlbumsPerArtist": self.average_albums_per_artist,
            "albumDistribution": [d.to_dict() for d in self.album_distribution],
        }


@dataclass(frozen=True)
class ArtistStatistics:
    """The artist statistics tool's output: per-artist rows plus an optional summary."""

    artists: list[ArtistStat] = field(default_factory=list)
    summary: Optional[ArtistSummary] = None

    def to_dict(self) -> dict:
        result: dict = {"artists": [a.to_dict() for a in self.artists]}
        if self.summary is not None:
            result["summary"] = self.summary.to_dict()
        return result
