# =============================================================================
# core/queries.py  -  Query Engine (filter, search, lookup)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Pure functions that pick albums out of the collection: by rank, year,
#   artist, genre or free text.  None of them mutate their input; each returns
#   a fresh list (or a single Album / NotFound).
#
# MATCHING RULES AT A GLANCE:
#   search_albums       ->  case-insensitive substring on artist OR title
#   find_album_by_rank  ->  exact rank
#   albums_by_year      ->  exact year string
#   albums_by_artist    ->  case-insensitive EXACT artist name
#   albums_by_genre     ->  case-insensitive substring on any genre tag
#
# ORDERING:
#   Year, artist and genre results are explicitly re-sorted by rank.  Free-text
#   search keeps the collection's own order.
#
# NOT FOUND IS NOT AN ERROR:
#   The albums_by_* lookups and find_album_by_rank return a NotFound message
#   when nothing matches.  The lower-level helpers (search_albums,
#   filter_by_year) return an empty list instead.
# =============================================================================

from typing import Sequence

from pitchfork_list.core.models import Album, NotFound


def _by_rank(albums: list[Album]) -> list[Album]:
    return sorted(albums, key=lambda a: a.rank)


def _alphabetical_key(value: str) -> tuple[str, str]:
    """Case-insensitive sort key; the raw value breaks ties deterministically."""
    return (value.casefold(), value)


def list_albums(albums: Sequence[Album]) -> list[Album]:
    """Every album, in the collection's (rank) order."""
    return list(albums)


def unique_genres(albums: Sequence[Album]) -> list[str]:
    """All distinct genre tags, sorted case-insensitively ascending."""
    seen = {genre for album in albums for genre in album.genres}
    return sorted(seen, key=_alphabetical_key)


def search_albums(albums: Sequence[Album], query: str) -> list[Album]:
    """Albums whose artist or title contains ``query`` (case-insensitive).

    The query is trimmed first.  Results keep the collection order.
    """
    term = query.strip().casefold()
    return [
        album for album in albums
        if term in album.artist.casefold() or term in album.album.casefold()
    ]


def find_album_by_rank(albums: Sequence[Album], rank: int) -> Album | NotFound:
    for album in albums:
        if album.rank == rank:
            return album
    return NotFound(f"No album found at rank {rank}")


def filter_by_year(
    albums: Sequence[Album], year: str, sort_by_rank: bool = False
) -> list[Album]:
    """Albums released in ``year``.

    Args:
        albums: The collection to filter.
        year: A 4-digit year string, compared exactly.
        sort_by_rank: Re-sort the matches by rank.  When False the
            collection's own order is kept (used by the year prompt).
    """
    matches = [album for album in albums if album.year == year]
    return _by_rank(matches) if sort_by_rank else matches


def albums_by_year(albums: Sequence[Album], year: str) -> list[Album] | NotFound:
    matches = filter_by_year(albums, year, sort_by_rank=True)
    if not matches:
        return NotFound(f"No albums found for year {year}")
    return matches


def albums_by_artist(albums: Sequence[Album], artist: str) -> list[Album] | NotFound:
    wanted = artist.casefold()
    matches = _by_rank([album for album in albums if album.artist.casefold() == wanted])
    if not matches:
        return NotFound(f'No albums found for artist "{artist}"')
    return matches


def albums_by_genre(albums: Sequence[Album], genre: str) -> list[Album] | NotFound:
    wanted = genre.casefold()
    matches = _by_rank([
        album for album in albums
        if any(wanted in tag.casefold() for tag in album.genres)
    ])
    if not matches:
        return NotFound(f'No albums found for genre "{genre}"')
    return matches
