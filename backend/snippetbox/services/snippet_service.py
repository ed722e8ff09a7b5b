"""
Snippetbox Backend - Snippet Service (Request Handlers)
========================================================

What:  The three Snippetbox handlers: home page, snippet display, snippet creation.
How:   Each handler is a pure function of the SnippetRequest. Success returns a
       HandlerResult; a failed precondition raises NotFoundError or
       MethodNotAllowedError and the request ends there.
Who:   Bound to URL patterns by snippetbox.routing.default_routes().

Handler Contract:
    home            GET  /          200 "Hello from Snippetbox"
    show_snippet    GET  /snippet   200 "Display a specific snippet with id {id}"
    create_snippet  POST /snippet/create
                                    200 "Create a new snippet..."

    SnippetService holds no state, so the single module-level instance
    serves every concurrent request.
"""

import logging

from snippetbox.exceptions import MethodNotAllowedError, NotFoundError
from snippetbox.schemas.snippet import HandlerResult, SnippetRequest

logger = logging.getLogger(__name__)

HOME_BODY = "Hello from Snippetbox"
SHOW_SNIPPET_BODY = "Display a specific snippet with id {id}"
CREATE_SNIPPET_BODY = "Create a new snippet..."


class SnippetService:
    """
    Handlers for the Snippetbox routes.

    Responsibilities:
        - home(): exact-match root page
        - show_snippet(): validated snippet id echo
        - create_snippet(): POST-only creation stub
    """

    def home(self, request: SnippetRequest) -> HandlerResult:
        """
        Serve the home page.

        The route table sends every otherwise unmatched path here, so the
        path is checked again: only the literal root is the home page.

        Raises:
            NotFoundError: For any path other than ``/``.
        """
        if request.path != "/":
            raise NotFoundError()
        return HandlerResult(body=HOME_BODY)

    def show_snippet(self, request: SnippetRequest) -> HandlerResult:
        """
        Display the snippet named by the ``id`` query parameter.

        Raises:
            NotFoundError: If ``id`` was missing or did not parse as an
                integer >= 1 (SnippetRequest stores None in both cases).
        """
        if request.id is None:
            raise NotFoundError()
        return HandlerResult(body=SHOW_SNIPPET_BODY.format(id=request.id))

    def create_snippet(self, request: SnippetRequest) -> HandlerResult:
        """
        Create a new snippet (placeholder).

        Raises:
            MethodNotAllowedError: For any method but POST; the response
                carries ``Allow: POST``.
        """
        if request.method != "POST":
            logger.debug("Rejected %s on %s", request.method, request.path)
            raise MethodNotAllowedError(allowed=("POST",))
        return HandlerResult(body=CREATE_SNIPPET_BODY)


snippet_service = SnippetService()
