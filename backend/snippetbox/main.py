"""
Snippetbox Backend - FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (``uvicorn snippetbox.main:app``), by the
       ``snippetbox`` CLI, and by the tests.
When:  Once at server startup; the returned app handles all subsequent requests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐                   │
    │  │ Req ID   │→│  Logging        │                   │
    │  └──────────┘ └─────────────────┘                   │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────┐ ┌──────────────────────────┐  │
    │  │ /static/* (files)│ │ /* → Router.dispatch     │  │
    │  └──────────────────┘ └──────────────────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ MethodNotAllowed→405 │ *→500   │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Every path that is not a route or a static file answers 404, so the
interactive docs and trailing-slash redirects are switched off.
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from snippetbox import __version__
from snippetbox.config import Settings, settings as default_settings
from snippetbox.exceptions import METHOD_NOT_ALLOWED_BODY, NOT_FOUND_BODY, SnippetboxError
from snippetbox.middleware.logging import RequestLoggingMiddleware
from snippetbox.middleware.request_id import RequestIDMiddleware, request_id_var
from snippetbox.routes import snippets
from snippetbox.routing import Router, default_routes
from snippetbox.static import ListingStaticFiles, redirect_to_static_root

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

class _MaxLevelFilter(logging.Filter):
    """Passes records strictly below ``level``."""

    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the whole process.

    INFO and below go to stdout, WARNING and above to stderr.
    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    """
    info_handler = logging.StreamHandler(sys.stdout)
    info_handler.addFilter(_MaxLevelFilter(logging.WARNING))
    error_handler = logging.StreamHandler(sys.stderr)
    error_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[info_handler, error_handler],
        force=True,
    )

    # Access lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Configure logging and log startup and shutdown."""
    app_settings: Settings = app.state.settings
    setup_logging(app_settings.log_level)
    logger.info("Starting server on %s", app_settings.listen_addr)
    logger.info("Routes: %s", ", ".join(app.state.router.patterns))

    yield

    logger.info("Snippetbox shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        SnippetboxError          → its own status, body and headers
        StarletteHTTPException   → plain-text 404/405 for framework errors
                                   (missing static files, non-GET static requests)
        Exception (fallback)     → 500 Internal Server Error

    Error bodies are plain text, matching the successful responses.
    """

    @app.exception_handler(SnippetboxError)
    async def handle_snippetbox_error(request: Request, exc: SnippetboxError):
        """Not-found or method-not-allowed outcome from a handler."""
        return PlainTextResponse(
            content=exc.message,
            status_code=exc.status_code,
            headers=exc.headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            content = NOT_FOUND_BODY
        elif exc.status_code == 405:
            content = METHOD_NOT_ALLOWED_BODY
        else:
            content = str(exc.detail)
        return PlainTextResponse(
            content=content,
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace to the log, generic body to the client."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return PlainTextResponse(content="Internal Server Error", status_code=500)


# ══════════════════════════════════════════════════════════════════════════
# Static Files
# ══════════════════════════════════════════════════════════════════════════

def mount_static(app: FastAPI, static_dir: str) -> bool:
    """
    Serve ``static_dir`` under /static/, with the prefix stripped.

    Directories are listed, and ``/static`` redirects to ``/static/``.

    Returns False (and mounts nothing) when the directory does not exist;
    /static/... then falls through to the catch-all route and answers 404.
    """
    directory = Path(static_dir)
    if not directory.is_dir():
        logger.warning("Static directory %s not found; /static/ is disabled", directory)
        return False
    app.mount("/static", ListingStaticFiles(directory=str(directory)), name="static")
    app.add_route("/static", redirect_to_static_root, include_in_schema=False)
    return True


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_settings: Optional[Settings] = None, router: Optional[Router] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the module-level settings).
        router:       Route table dispatcher (defaults to default_routes()).

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app_settings = app_settings or default_settings
    app = FastAPI(
        title="Snippetbox",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.router = router or Router(default_routes())

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → routes
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    # The static mount must precede the catch-all route
    mount_static(app, app_settings.static_dir)
    app.include_router(snippets.router)

    return app


app = create_app()
