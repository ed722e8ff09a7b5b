"""
Snippetbox Backend - Snippet Route Handler
===========================================

What:  The single HTTP entry point for every non-static request.
How:   A catch-all route converts the Starlette request into a SnippetRequest,
       hands it to the Router stored on ``app.state``, and renders the
       HandlerResult as text/plain.
Who:   Mounted by create_app() after the /static mount.

Error responses (handled by global exception handlers):
    HTTP 404: unmatched path or invalid snippet id (NotFoundError)
    HTTP 405: non-POST snippet creation (MethodNotAllowedError)
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from snippetbox.routing import Router
from snippetbox.schemas.snippet import HandlerResult, SnippetRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Snippets"])


def render(result: HandlerResult) -> PlainTextResponse:
    """Turns a handler result into a plain-text HTTP response."""
    return PlainTextResponse(
        content=result.body,
        status_code=result.status,
        headers=result.headers,
    )


async def dispatch(request: Request) -> PlainTextResponse:
    """
    Dispatch a request through the application's route table.

    When ``id`` is repeated in the query string the first value is used.
    """
    ids = request.query_params.getlist("id")
    snippet_request = SnippetRequest.build(
        path=request.url.path,
        method=request.method,
        raw_id=ids[0] if ids else None,
    )
    snippet_router: Router = request.app.state.router
    return render(snippet_router.dispatch(snippet_request))


# No method list: every method, nonstandard ones included, reaches the handlers
router.add_route("/{path:path}", dispatch, include_in_schema=False)
