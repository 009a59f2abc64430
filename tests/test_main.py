"""
Tests for pitchfork_list.main console helpers.

These tests verify:
- Tool calls are printed with their arguments
- Final-response text is assembled from every text part
"""

from __future__ import annotations

from types import SimpleNamespace

from google.genai import types

from pitchfork_list.main import final_text, format_tool_call

# =============================================================================
# Console formatting
# =============================================================================


class TestFormatToolCall:
    def test_with_arguments(self) -> None:
        assert format_tool_call("get_album_by_rank", {"rank": 12}) == "get_album_by_rank(rank=12)"

    def test_keeps_argument_order(self) -> None:
        line = format_tool_call("get_genre_statistics", {"sortBy": "genre", "minCount": 2})
        assert line == "get_genre_statistics(sortBy='genre', minCount=2)"

    def test_without_arguments(self) -> None:
        assert format_tool_call("list_genres", None) == "list_genres()"


class TestFinalText:
    def test_joins_text_parts(self) -> None:
        content = types.Content(
            role="model", parts=[types.Part(text="Kid A "), types.Part(text="is number 1.")]
        )
        assert final_text(SimpleNamespace(content=content)) == "Kid A is number 1."

    def test_empty_event(self) -> None:
        assert final_text(SimpleNamespace(content=None)) == ""
