# =============================================================================
# tools/mcp_server.py  -  FastMCP Server (ALL tools, prompts and resources)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes the ranked album list over MCP.  Each tool is a thin wrapper
#   around a core/ function: it logs the call, runs the query, and renders the
#   result as text.
#
# HOW IT WORKS (the flow):
#   1. main() loads the album list ONCE (core/album_store.py)
#   2. create_server() registers every tool against that loaded store
#   3. A client calls a tool by name (e.g., "get_albums_by_year")
#   4. FastMCP validates the arguments against the Annotated constraints
#      below; bad arguments never reach core/
#   5. The tool calls core/, renders the result, and returns the text
#
# TOOL NAMING CONVENTIONS:
#   - list_*    -> Whole-collection views
#   - search_*  -> Free-text matching
#   - get_*     -> Lookups and statistics
#   All tools are read-only and idempotent.  The list never changes while the
#   server is running.
#
# EMPTY RESULTS ARE NOT ERRORS:
#   A valid query with no matches returns a plain-text explanation
#   ("No albums found for year 2003").  Only INVALID arguments (rank 0,
#   year "1999", empty artist) come back as tool errors.
#
# PARAMETER NAMES:
#   The statistics tools take camelCase parameters (sortBy, minCount,
#   minAlbums, showSummary); those are the names MCP clients send.
#
# RUNNING THIS SERVER:
#     a) Standalone:  python -m pitchfork_list.tools.mcp_server
#                     (or the pitchfork-list-server console script)
#     b) From the ADK agent via stdio transport (pitchfork_list/agent/)
#   Set MCP_TRANSPORT=http or sse to serve over the network instead.
# =============================================================================

import logging
import sys
from typing import Annotated, Literal

from dotenv import load_dotenv
from fastmcp import FastMCP
from pydantic import Field, StringConstraints

from pitchfork_list.config import Settings
from pitchfork_list.core import queries, statistics
from pitchfork_list.core.album_store import AlbumStore, DataUnavailable, JsonFileSource
from pitchfork_list.core.briefs import decade_overview_brief, year_context_brief
from pitchfork_list.core.models import MAX_RANK, YEAR_PATTERN
from pitchfork_list.core.presentation import render

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the stdio transport uses STDOUT for MCP messages.
# A log line on stdout would corrupt the protocol stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for responses
#     - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status messages
_RESET = "\033[0m"

# Responses can be the whole list; the log only needs a glimpse.
_RESPONSE_PREVIEW_CHARS = 300


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log a preview of the response text in GREEN, then return the text."""
    preview = text if len(text) <= _RESPONSE_PREVIEW_CHARS else text[:_RESPONSE_PREVIEW_CHARS] + "…"
    logging.info(f"{_GREEN}  ← {tool_name} response ({len(text)} chars): {preview}{_RESET}")
    return text


def _describe(result) -> str:
    if isinstance(result, list):
        return f"{len(result)} match(es)"
    return type(result).__name__


# =============================================================================
# Boundary validation
# =============================================================================
# Declarative argument rules.  FastMCP checks them with pydantic before a tool
# body runs and reports violations to the client as tool errors.  Integer and
# boolean arguments are strict: "3" is not a rank and "false" is not a flag.
# =============================================================================
SearchQuery = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1),
    Field(description="Search term to match against artist names or album titles (case-insensitive)"),
]
Rank = Annotated[
    int,
    Field(strict=True, ge=1, le=MAX_RANK, description=f"The rank position of the album (1-{MAX_RANK})"),
]
Year = Annotated[
    str,
    Field(pattern=YEAR_PATTERN, description='The release year (2000-2009, e.g., "2005")'),
]
ArtistName = Annotated[
    str,
    Field(min_length=1, description="The artist name to search for (case-insensitive)"),
]
GenreName = Annotated[
    str,
    Field(min_length=1, description="The genre/tag to filter by (case-insensitive)"),
]
MinimumCount = Annotated[int, Field(strict=True, ge=1)]

SERVER_INSTRUCTIONS = (
    "Provides access to Pitchfork's \"200 Best Albums of the 2000s\" ranked list. "
    "Search, filter, and explore albums by artist, title, year (2000-2009), rank "
    "position, or genre. All albums include rank, artist, title, release year, and "
    "genre tags."
)


def create_server(store: AlbumStore) -> FastMCP:
    """Create the FastMCP server over an already-loaded album store.

    Every tool, prompt and resource reads ``store.albums``.  The store must be
    loaded before this is called; nothing here fetches data.
    """
    mcp = FastMCP("pitchfork-list", instructions=SERVER_INSTRUCTIONS)
    albums = store.albums

    # =========================================================================
    # Collection views
    # =========================================================================
    @mcp.tool()
    def list_albums() -> str:
        """Returns all albums sorted by rank (1 = best).

        Each album has: artist, album (title), rank, year, genres.
        """
        _log_request("list_albums")
        return _log_response("list_albums", render(queries.list_albums(albums)))

    @mcp.tool()
    def list_genres() -> str:
        """Returns all unique genres sorted alphabetically (case-insensitive)."""
        _log_request("list_genres")
        genres = queries.unique_genres(albums)
        _log_status(f"{len(genres)} distinct genres")
        return _log_response("list_genres", render(genres))

    # =========================================================================
    # Search and lookups
    # =========================================================================
    @mcp.tool()
    def search_albums(query: SearchQuery) -> str:
        """Search albums by artist or title using case-insensitive partial matching.

        Results keep rank order.  Returns an empty list when nothing matches.
        """
        _log_request("search_albums", query=query)
        results = queries.search_albums(albums, query)
        _log_status(_describe(results))
        return _log_response("search_albums", render(results))

    @mcp.tool()
    def get_album_by_rank(rank: Rank) -> str:
        """Find a specific album by its rank position (1-200).

        Returns a "No album found" message if no album holds that rank.
        """
        _log_request("get_album_by_rank", rank=rank)
        return _log_response("get_album_by_rank", render(queries.find_album_by_rank(albums, rank)))

    @mcp.tool()
    def get_albums_by_year(year: Year) -> str:
        """Find all albums released in a specific year (2000-2009), sorted by rank."""
        _log_request("get_albums_by_year", year=year)
        results = queries.albums_by_year(albums, year)
        _log_status(_describe(results))
        return _log_response("get_albums_by_year", render(results))

    @mcp.tool()
    def get_albums_by_artist(artist: ArtistName) -> str:
        """Find all albums by a specific artist (case-insensitive exact match), sorted by rank."""
        _log_request("get_albums_by_artist", artist=artist)
        results = queries.albums_by_artist(albums, artist)
        _log_status(_describe(results))
        return _log_response("get_albums_by_artist", render(results))

    @mcp.tool()
    def get_albums_by_genre(genre: GenreName) -> str:
        """Find all albums that include a specific genre/tag (case-insensitive), sorted by rank.

        Partial tags match: "rock" finds "Indie Rock" and "Art Rock".
        """
        _log_request("get_albums_by_genre", genre=genre)
        results = queries.albums_by_genre(albums, genre)
        _log_status(_describe(results))
        return _log_response("get_albums_by_genre", render(results))

    # =========================================================================
    # Statistics
    # =========================================================================
    @mcp.tool()
    def get_year_statistics(
        sortBy: Annotated[
            Literal["count", "year"],
            Field(description="Sort by album count (descending) or year (ascending). Defaults to count."),
        ] = "count",
    ) -> str:
        """Returns the count of albums for each year, sorted by count or year.

        Each row: year, count, percentage (share of all albums, 1 decimal).
        Albums without a year are counted under "unknown".
        """
        _log_request("get_year_statistics", sortBy=sortBy)
        rows = statistics.year_statistics(albums, sort_by=sortBy)
        return _log_response("get_year_statistics", render(rows))

    @mcp.tool()
    def get_genre_statistics(
        sortBy: Annotated[
            Literal["count", "genre"],
            Field(description="Sort by album count (descending) or genre name (ascending). Defaults to count."),
        ] = "count",
        minCount: Annotated[
            MinimumCount,
            Field(description="Only show genres that appear on at least this many albums. Defaults to 1."),
        ] = 1,
    ) -> str:
        """Returns the count of albums for each genre/tag, sorted by frequency or alphabetically.

        Each row: genre, count, percentage.  Albums carry several tags, so the
        percentages can add up to more than 100.
        """
        _log_request("get_genre_statistics", sortBy=sortBy, minCount=minCount)
        rows = statistics.genre_statistics(albums, sort_by=sortBy, min_count=minCount)
        _log_status(f"{len(rows)} genres with at least {minCount} album(s)")
        return _log_response("get_genre_statistics", render(rows))

    @mcp.tool()
    def get_artist_statistics(
        sortBy: Annotated[
            Literal["count", "artist"],
            Field(description="Sort by album count (descending) or artist name (ascending). Defaults to count."),
        ] = "count",
        minAlbums: Annotated[
            MinimumCount,
            Field(description="Only show artists with at least this many albums. Defaults to 1."),
        ] = 1,
        showSummary: Annotated[
            bool,
            Field(strict=True, description="Include summary statistics about artist distribution. Defaults to true."),
        ] = True,
    ) -> str:
        """Returns statistics about artists, including album counts and distribution patterns.

        Returns JSON with:
          - artists: rows of artist, albumCount, percentage
          - summary (when showSummary): totalArtists, artistsWithMultipleAlbums,
            averageAlbumsPerArtist, albumDistribution
        """
        _log_request("get_artist_statistics",
                     sortBy=sortBy, minAlbums=minAlbums, showSummary=showSummary)
        result = statistics.artist_statistics(
            albums, sort_by=sortBy, min_albums=minAlbums, show_summary=showSummary
        )
        _log_status(f"{len(result.artists)} artists with at least {minAlbums} album(s)")
        return _log_response("get_artist_statistics", render(result))

    # =========================================================================
    # Prompts
    # =========================================================================
    @mcp.prompt(
        name="analyze_year_context",
        description="Understand what made specific years notable in 2000s music",
    )
    def analyze_year_context(
        year: Annotated[str, Field(pattern=YEAR_PATTERN, description="Year to analyze (2000-2009)")],
    ) -> str:
        _log_request("analyze_year_context", year=year)
        return year_context_brief(albums, year)

    @mcp.prompt(
        name="2000s_overview",
        description="Get a simple overview of 2000s music trends based on Pitchfork's top 200 albums",
    )
    def decade_overview() -> str:
        _log_request("2000s_overview")
        return decade_overview_brief(albums)

    # =========================================================================
    # Resources
    # =========================================================================
    @mcp.resource(
        "pitchfork-list://genres",
        name="genres",
        description="All genres in the Pitchfork 2000s list",
        mime_type="text/plain",
    )
    def genres_resource() -> str:
        return "\n".join(queries.unique_genres(albums))

    return mcp


# =============================================================================
# Server entry point
# =============================================================================
# The album list must load before the server starts accepting calls.  If it
# can't be loaded, we log why and let the exception end the process: there
# is no useful partial service without the data.
# =============================================================================
def main() -> None:
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    try:
        store = AlbumStore.load(JsonFileSource(settings.data_path), settings.albums_key)
    except DataUnavailable as e:
        logging.error(f"Failed to load albums: {e}")
        raise

    mcp = create_server(store)
    logging.info(f"Serving {len(store)} albums over {settings.transport}")
    if settings.transport == "stdio":
        mcp.run()
    else:
        mcp.run(transport=settings.transport, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
