# =============================================================================
# core/statistics.py  -  Statistics Engine (sorted, percentage-annotated counts)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns the raw counts from core/aggregation.py into the rows the statistics
#   tools return: filtered by a minimum count, sorted, and annotated with each
#   category's share of the whole list.
#
# SORTING:
#   "count"           ->  descending count; ties keep first-seen (rank) order
#   "year" / "genre" / "artist"  ->  ascending name, case-insensitive
#
# PERCENTAGES:
#   Always relative to the TOTAL number of albums, even for genres (where one
#   album can carry several tags) and even after min-count filtering.  Values
#   are rounded half-up to one decimal:
#
#       percentage = floor(count / total * 100 * 10 + 0.5) / 10
#
#   so 12.25 -> 12.3 and 0.05 -> 0.1.  An empty collection yields 0.0.
# =============================================================================

import math
from collections import Counter
from typing import Sequence

from pitchfork_list.core.aggregation import count_by_artist, count_by_genre, count_by_year
from pitchfork_list.core.models import (
    Album,
    AlbumDistribution,
    ArtistStat,
    ArtistStatistics,
    ArtistSummary,
    GenreStat,
    YearStat,
)

SORT_BY_COUNT = "count"


def round_half_up(value: float, digits: int = 1) -> float:
    """Round a non-negative value half-up to ``digits`` decimals."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def percentage(count: int, total: int) -> float:
    """``count`` as a percentage of ``total``, one decimal, half-up."""
    if total == 0:
        return 0.0
    return round_half_up(count / total * 100)


def _ranked_entries(
    counts: Counter[str], sort_by: str, name_field: str, min_count: int = 1
) -> list[tuple[str, int]]:
    """Filter ``counts`` to ``min_count`` and order them per ``sort_by``.

    ``name_field`` is the only non-count value ``sort_by`` may take
    ("year", "genre" or "artist").
    """
    if sort_by not in (SORT_BY_COUNT, name_field):
        raise ValueError(f"sort_by must be {SORT_BY_COUNT!r} or {name_field!r}, got {sort_by!r}")

    entries = [(key, count) for key, count in counts.items() if count >= min_count]
    if sort_by == SORT_BY_COUNT:
        # Stable sort: equal counts stay in first-seen (rank) order.
        entries.sort(key=lambda entry: entry[1], reverse=True)
    else:
        entries.sort(key=lambda entry: (entry[0].casefold(), entry[0]))
    return entries


def year_statistics(albums: Sequence[Album], sort_by: str = SORT_BY_COUNT) -> list[YearStat]:
    total = len(albums)
    return [
        YearStat(year=year, count=count, percentage=percentage(count, total))
        for year, count in _ranked_entries(count_by_year(albums), sort_by, "year")
    ]


def genre_statistics(
    albums: Sequence[Album], sort_by: str = SORT_BY_COUNT, min_count: int = 1
) -> list[GenreStat]:
    total = len(albums)
    return [
        GenreStat(genre=genre, count=count, percentage=percentage(count, total))
        for genre, count in _ranked_entries(count_by_genre(albums), sort_by, "genre", min_count)
    ]


def artist_statistics(
    albums: Sequence[Album],
    sort_by: str = SORT_BY_COUNT,
    min_albums: int = 1,
    show_summary: bool = True,
) -> ArtistStatistics:
    """Per-artist album counts, optionally with a distribution summary.

    The summary mixes two populations:
      - total_artists and average_albums_per_artist cover EVERY artist
      - artists_with_multiple_albums and album_distribution cover only the
        artists that passed the ``min_albums`` filter
    """
    total = len(albums)
    counts = count_by_artist(albums)
    entries = _ranked_entries(counts, sort_by, "artist", min_albums)

    artists = [
        ArtistStat(artist=artist, album_count=count, percentage=percentage(count, total))
        for artist, count in entries
    ]
    if not show_summary:
        return ArtistStatistics(artists=artists)

    total_artists = len(counts)
    histogram = Counter(count for _, count in entries)
    summary = ArtistSummary(
        total_artists=total_artists,
        artists_with_multiple_albums=sum(1 for _, count in entries if count > 1),
        average_albums_per_artist=(
            round_half_up(total / total_artists) if total_artists else 0.0
        ),
        album_distribution=[
            AlbumDistribution(albums_per_artist=per_artist, number_of_artists=n)
            for per_artist, n in sorted(histogram.items(), reverse=True)
        ],
    )
    return ArtistStatistics(artists=artists, summary=summary)
