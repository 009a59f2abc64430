# =============================================================================
# core/presentation.py  -  Presentation Layer (engine result -> tool text)
# =============================================================================
#
# Every tool hands its result to render() and returns the text it gets back.
# The engines produce a small set of result shapes:
#
#   str                     ->  passed through verbatim
#   NotFound                ->  its message, verbatim
#   Album / stats / lists   ->  compact JSON
#
# Models serialize through their own to_dict(), which fixes the wire keys.
# =============================================================================

import json
from typing import Any

from pitchfork_list.core.models import NotFound


def _jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    return value


def render(value: Any) -> str:
    """Render an engine result as the text content of a tool response."""
    if isinstance(value, str):
        return value
    if isinstance(value, NotFound):
        return value.message
    return json.dumps(_jsonable(value), separators=(",", ":"), ensure_ascii=False)
