"""
Snippetbox Backend - Router Unit Tests
======================================

What:  Tests for pattern matching and dispatch over the route table.

What we test:
    ✅ Exact patterns win over prefix patterns
    ✅ "/" catches unmatched paths (and Home then rejects them)
    ✅ Patterns without a trailing slash never prefix-match
    ✅ Duplicate patterns are rejected at construction
"""

import pytest

from snippetbox.exceptions import MethodNotAllowedError, NotFoundError
from snippetbox.routing import Route, Router, default_routes
from snippetbox.schemas.snippet import HandlerResult, SnippetRequest
from snippetbox.services.snippet_service import snippet_service


def _fixed(body):
    return lambda request: HandlerResult(body=body)


class TestRouterMatch:
    """Pattern selection rules."""

    def setup_method(self):
        self.router = Router(default_routes())

    def test_exact_matches(self):
        assert self.router.match("/") == snippet_service.home
        assert self.router.match("/snippet") == snippet_service.show_snippet
        assert self.router.match("/snippet/create") == snippet_service.create_snippet

    @pytest.mark.parametrize("path", ["/about", "/snippet/", "/snippet/create/", "/snippets", "/x/y/z"])
    def test_unmatched_paths_fall_back_to_root(self, path):
        assert self.router.match(path) == snippet_service.home

    def test_longest_prefix_wins(self):
        router = Router([
            Route("/", _fixed("root")),
            Route("/a/", _fixed("a")),
            Route("/a/b/", _fixed("ab")),
        ])
        assert router.match("/a/b/c")(None).body == "ab"
        assert router.match("/a/c")(None).body == "a"
        assert router.match("/c")(None).body == "root"

    def test_no_catch_all(self):
        router = Router([Route("/only", _fixed("only"))])
        assert router.match("/only/") is None
        assert router.match("/") is None

    def test_duplicate_pattern_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            Router([Route("/", _fixed("a")), Route("/", _fixed("b"))])

    def test_patterns(self):
        assert self.router.patterns == ["/", "/snippet", "/snippet/create"]


class TestRouterDispatch:
    """End-to-end dispatch through the default route table."""

    def setup_method(self):
        self.router = Router(default_routes())

    def test_home(self):
        result = self.router.dispatch(SnippetRequest.build("/", "GET"))
        assert result.body == "Hello from Snippetbox"

    def test_subpath_reaches_home_and_is_rejected(self):
        with pytest.raises(NotFoundError):
            self.router.dispatch(SnippetRequest.build("/about", "GET"))

    def test_show_snippet(self):
        result = self.router.dispatch(SnippetRequest.build("/snippet", "GET", "5"))
        assert result.body == "Display a specific snippet with id 5"

    def test_create_wrong_method(self):
        with pytest.raises(MethodNotAllowedError):
            self.router.dispatch(SnippetRequest.build("/snippet/create", "PUT"))

    def test_no_match_raises_not_found(self):
        router = Router([Route("/only", _fixed("only"))])
        with pytest.raises(NotFoundError):
            router.dispatch(SnippetRequest.build("/elsewhere", "GET"))
