"""
Snippetbox Backend - Request/Response Value Schemas
====================================================

What:  Pydantic models for the per-request values the handlers work on.
How:   Routes build a SnippetRequest from the incoming HTTP request; handlers
       return a HandlerResult that routes turn into a plain-text response.
Who:   Built by routes/snippets.py, consumed by services/snippet_service.py.
When:  One of each per request; never stored, never shared between requests.
"""

import re
from typing import Dict, Optional

from pydantic import BaseModel, Field, PositiveInt

# Optional sign then ASCII digits only: no whitespace, underscores or
# non-ASCII digits, which int() would otherwise accept.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

# Snippet ids are signed 64-bit values; anything wider fails to parse.
MAX_SNIPPET_ID = 2**63 - 1


def parse_snippet_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse a raw ``id`` query value into a positive snippet id.

    Returns None for a missing value, anything that is not a base-10 integer,
    values outside the signed 64-bit range, and values below 1. Leading
    zeros are accepted (``"007"`` → 7).
    """
    if raw is None or not _DECIMAL_RE.fullmatch(raw):
        return None
    value = int(raw)
    if value < 1 or value > MAX_SNIPPET_ID:
        return None
    return value


class SnippetRequest(BaseModel):
    """
    What:  The parts of an HTTP request the snippet handlers look at.
    Who:   Built per request by the catch-all route; passed to Router.dispatch.

    Invariant: ``id`` is either None or an integer >= 1.
    """

    path: str = Field(description="Decoded URL path, e.g. '/snippet'")
    method: str = Field(description="HTTP method exactly as sent; method names are case-sensitive")
    id: Optional[PositiveInt] = Field(
        default=None,
        description="Snippet id from the query string (None when missing or invalid)",
    )

    model_config = {"frozen": True}

    @classmethod
    def build(cls, path: str, method: str, raw_id: Optional[str] = None) -> "SnippetRequest":
        """Creates a request, discarding an ``id`` that does not parse."""
        return cls(path=path, method=method, id=parse_snippet_id(raw_id))


class HandlerResult(BaseModel):
    """
    What:  The status, headers and body a handler produced.
    Who:   Returned by every snippet handler; rendered as text/plain.
    """

    status: int = Field(default=200, description="HTTP status code")
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = Field(default="", description="Plain-text response body")

    model_config = {"frozen": True}
