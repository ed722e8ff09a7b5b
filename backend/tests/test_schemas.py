"""
Snippetbox Backend - Schema Unit Tests
======================================

What:  Tests for snippet id parsing and the SnippetRequest/HandlerResult values.
"""

import pytest
from pydantic import ValidationError

from snippetbox.schemas.snippet import (
    MAX_SNIPPET_ID,
    HandlerResult,
    SnippetRequest,
    parse_snippet_id,
)


class TestParseSnippetId:
    """Base-10 parsing of the raw id query value."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("1", 1), ("5", 5), ("0042", 42), ("+3", 3), (str(MAX_SNIPPET_ID), MAX_SNIPPET_ID)],
    )
    def test_accepts_positive_integers(self, raw, expected):
        assert parse_snippet_id(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "-0", "-1", "-999", "+0"])
    def test_rejects_values_below_one(self, raw):
        assert parse_snippet_id(raw) is None

    @pytest.mark.parametrize(
        "raw",
        [None, "", "abc", "5a", "1.0", "1e3", " 7", "7 ", "1_0", "٣", "+", "-", "0x1f"],
    )
    def test_rejects_non_decimal(self, raw):
        assert parse_snippet_id(raw) is None

    def test_rejects_out_of_range(self):
        assert parse_snippet_id(str(MAX_SNIPPET_ID + 1)) is None
        assert parse_snippet_id("9" * 40) is None


class TestSnippetRequest:
    def test_build_parses_id(self):
        request = SnippetRequest.build("/snippet", "GET", "9")
        assert request.method == "GET"
        assert request.id == 9

    def test_build_keeps_method_case(self):
        assert SnippetRequest.build("/snippet/create", "post").method == "post"

    def test_build_drops_invalid_id(self):
        assert SnippetRequest.build("/snippet", "GET", "-4").id is None

    def test_direct_construction_enforces_positive_id(self):
        with pytest.raises(ValidationError):
            SnippetRequest(path="/snippet", method="GET", id=0)

    def test_frozen(self):
        request = SnippetRequest.build("/", "GET")
        with pytest.raises(ValidationError):
            request.path = "/other"


class TestHandlerResult:
    def test_defaults(self):
        result = HandlerResult()
        assert result.status == 200
        assert result.headers == {}
        assert result.body == ""
