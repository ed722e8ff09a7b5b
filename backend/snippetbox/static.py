"""
Snippetbox Backend - Static File Serving
========================================

What:  Serves the static directory under /static/, with directory listings.
How:   Starlette StaticFiles serves regular files. A directory answers with a
       minimal HTML index of its entries; a directory path without a
       trailing slash is redirected to the slashed form first.
Who:   Mounted by snippetbox.main.mount_static().

Listing format (one anchor per entry, sorted by name, directories get "/"):
    <!doctype html>
    <meta name="viewport" content="width=device-width">
    <pre>
    <a href="css/">css/</a>
    </pre>
"""

import html
import os
import stat
from typing import List
from urllib.parse import quote

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import URL
from starlette.exceptions import HTTPException
from starlette.responses import HTMLResponse, RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

LISTING_HEAD = '<!doctype html>\n<meta name="viewport" content="width=device-width">\n<pre>\n'
LISTING_TAIL = "</pre>\n"


def render_listing(directory: str) -> str:
    """Builds the HTML index for ``directory``."""
    entries: List[str] = []
    for entry in sorted(os.scandir(directory), key=lambda e: e.name):
        name = entry.name + ("/" if entry.is_dir() else "")
        entries.append(f'<a href="{html.escape(quote(name))}">{html.escape(name)}</a>\n')
    return LISTING_HEAD + "".join(entries) + LISTING_TAIL


class ListingStaticFiles(StaticFiles):
    """StaticFiles that lists directories instead of answering 404."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            full_path, stat_result = await run_in_threadpool(self.lookup_path, path)
            if stat_result is None or not stat.S_ISDIR(stat_result.st_mode):
                raise

        if not scope["path"].endswith("/"):
            url = URL(scope=scope)
            return RedirectResponse(url=str(url.replace(path=url.path + "/")), status_code=301)

        body = await run_in_threadpool(render_listing, full_path)
        return HTMLResponse(body)


async def redirect_to_static_root(request) -> RedirectResponse:
    """``/static`` → ``/static/``."""
    return RedirectResponse(url="/static/", status_code=301)
