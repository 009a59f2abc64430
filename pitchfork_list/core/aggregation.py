# =============================================================================
# core/aggregation.py  -  Aggregation Engine (raw frequency counts)
# =============================================================================
#
# Three counting functions, each mapping a category to how many times it
# occurs.  They are the building blocks for the statistics tools and the
# overview prompt.
#
# These functions never sort and never round.  A Counter keeps keys in the
# order they were first seen, i.e. the collection's rank order.
#
# COUNTING RULES:
#   by year    ->  one count per album; a missing year counts as "unknown"
#   by genre   ->  one count per TAG, so an album with 3 tags adds 3 counts
#   by artist  ->  exact, case-sensitive artist string
# =============================================================================

from collections import Counter
from typing import Sequence

from pitchfork_list.core.models import Album

UNKNOWN_YEAR = "unknown"


def count_by_year(albums: Sequence[Album]) -> Counter[str]:
    return Counter(album.year or UNKNOWN_YEAR for album in albums)


def count_by_genre(albums: Sequence[Album]) -> Counter[str]:
    return Counter(genre for album in albums for genre in album.genres)


def count_by_artist(albums: Sequence[Album]) -> Counter[str]:
    return Counter(album.artist for album in albums)
