# =============================================================================
# core/briefs.py  -  Prompt Briefs (data-grounded analysis requests)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Builds the text behind the server's two MCP prompts.  Each brief pairs a
#   slice of the ranked list with a fixed set of analysis questions, so the
#   LLM's answer is grounded in the actual rankings rather than its memory.
#
#   This is templating only.  The numbers come from core/queries.py and
#   core/aggregation.py; the prose comes from the LLM that receives the brief.
# =============================================================================

from collections import Counter
from typing import Sequence

from pitchfork_list.core.aggregation import UNKNOWN_YEAR, count_by_genre, count_by_year
from pitchfork_list.core.models import Album
from pitchfork_list.core.queries import filter_by_year

TOP_YEARS = 5
TOP_GENRES = 10
TOP_ALBUMS = 10


def _top(counts: Counter[str], limit: int) -> list[tuple[str, int]]:
    """Highest counts first; equal counts in the order first seen (rank order)."""
    return counts.most_common(limit)


def year_context_brief(albums: Sequence[Album], year: str) -> str:
    """Ask for the musical context of ``year``, listing that year's ranked albums."""
    year_albums = filter_by_year(albums, year)
    listing = "\n".join(
        f"#{a.rank}. {a.artist} - {a.album} [{', '.join(a.genres)}]" for a in year_albums
    )

    return f"""Analyze the musical significance of {year} based on these Pitchfork-ranked albums:

{year} Albums in Top 200:
{listing}

Analysis Request:
1. What made {year} notable in music history?
2. What genres/movements were prominent that year?
3. What innovations or breakthroughs happened?
4. How does this year compare to others in the decade?

Use your music knowledge combined with this ranking data to provide context."""


def decade_overview_brief(albums: Sequence[Album]) -> str:
    """Ask for an overview of the decade, with headline counts and the top 10."""
    top_years = "\n".join(
        f"{year}: {count} albums" for year, count in _top(count_by_year(albums), TOP_YEARS)
    )
    top_genres = "\n".join(
        f"{genre}: {count} albums" for genre, count in _top(count_by_genre(albums), TOP_GENRES)
    )
    top_albums = "\n".join(
        f"#{a.rank}. {a.artist} - {a.album} ({a.year or UNKNOWN_YEAR})"
        for a in list(albums)[:TOP_ALBUMS]
    )

    return f"""Analyze the 2000s music decade based on Pitchfork's top 200 albums.

Basic Stats:
- Total albums: {len(albums)}
- Years covered: 2000-2009

Most Productive Years:
{top_years}

Most Common Genres:
{top_genres}

Top 10 Albums:
{top_albums}

Questions to Answer:
1. What defined the 2000s music decade according to critics?
2. Which years and genres dominated critical acclaim?
3. What makes these top albums special?

Provide a simple overview of 2000s music culture based on this data."""
