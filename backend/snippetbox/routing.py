"""
Snippetbox Backend - Route Table and Dispatcher
================================================

What:  Selects exactly one handler for each request by URL path.
How:   A Router is constructed with an explicit route table. Matching follows
       classic serve-mux rules:

         1. A pattern equal to the path wins.
         2. Otherwise the longest pattern ending in "/" that prefixes the
            path wins ("/" matches everything, so it is the catch-all).

       Patterns without a trailing slash ("/snippet") only ever match exactly.
Who:   Built by create_app() and stored on ``app.state.router``; called by the
       catch-all route in routes/snippets.py.
"""

import logging
from typing import Callable, Dict, Iterable, List, NamedTuple, Optional

from snippetbox.exceptions import NotFoundError
from snippetbox.schemas.snippet import HandlerResult, SnippetRequest
from snippetbox.services.snippet_service import SnippetService, snippet_service

logger = logging.getLogger(__name__)

Handler = Callable[[SnippetRequest], HandlerResult]


class Route(NamedTuple):
    pattern: str
    handler: Handler


def default_routes(service: SnippetService = snippet_service) -> List[Route]:
    """The Snippetbox route table."""
    return [
        Route("/", service.home),
        Route("/snippet", service.show_snippet),
        Route("/snippet/create", service.create_snippet),
    ]


class Router:
    """
    Path-to-handler dispatcher over a fixed route table.

    The table is copied at construction and never modified afterwards, so a
    Router can be shared by concurrent requests.
    """

    def __init__(self, routes: Iterable[Route]):
        self._exact: Dict[str, Handler] = {}
        self._prefixes: List[Route] = []
        for route in routes:
            if route.pattern in self._exact:
                raise ValueError(f"Duplicate route pattern '{route.pattern}'")
            self._exact[route.pattern] = route.handler
            if route.pattern.endswith("/"):
                self._prefixes.append(route)
        # Longest prefix first
        self._prefixes.sort(key=lambda r: len(r.pattern), reverse=True)

    @property
    def patterns(self) -> List[str]:
        return list(self._exact)

    def match(self, path: str) -> Optional[Handler]:
        """Returns the handler for ``path``, or None when nothing matches."""
        handler = self._exact.get(path)
        if handler is not None:
            return handler
        for route in self._prefixes:
            if path.startswith(route.pattern):
                return route.handler
        return None

    def dispatch(self, request: SnippetRequest) -> HandlerResult:
        """
        Run the handler matching ``request.path``.

        Raises:
            NotFoundError: If no pattern matches, or raised by the handler.
            MethodNotAllowedError: Raised by the handler.
        """
        handler = self.match(request.path)
        if handler is None:
            raise NotFoundError()
        return handler(request)
